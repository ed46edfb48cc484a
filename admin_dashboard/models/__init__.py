# Models package
from admin_dashboard.models.division import Division
from admin_dashboard.models.position import Position
from admin_dashboard.models.role import Role
from admin_dashboard.models.user import User, UserRole
