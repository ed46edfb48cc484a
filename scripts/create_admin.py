"""Script to create the admin role and an initial admin user."""
import sys
import os
from datetime import date

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from admin_dashboard.auth import get_password_hash
from admin_dashboard.config import settings
from admin_dashboard.database import SessionLocal, engine, Base, unit_of_work
from admin_dashboard.models import Role, User, UserRole


def create_admin():
    """Create the admin role and user if they do not exist."""
    # Create tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        role_name = settings.ADMIN_ROLES[0]
        role = db.query(Role).filter(Role.name == role_name).first()

        admin = db.query(User).filter(User.email == "admin@example.com").first()
        if admin:
            print(f"Admin user already exists: {admin.email}")
            return

        with unit_of_work(db):
            if not role:
                role = Role(name=role_name, level=100, is_active=True, created_by="system")
                db.add(role)
                db.flush()

            admin_user = User(
                employee_id="ADMIN001",
                name="System Administrator",
                email="admin@example.com",
                password=get_password_hash("admin123"),
                join_date=date.today(),
                is_active=True,
                created_by="system",
                updated_by="system",
            )
            db.add(admin_user)
            db.flush()
            db.add(UserRole(user_id=admin_user.id, role_id=role.id, created_by="system"))

        print("Admin user created successfully!")
        print("Email: admin@example.com")
        print("Password: admin123")
        print("\nPlease change the password after first login!")

    finally:
        db.close()


if __name__ == "__main__":
    create_admin()
