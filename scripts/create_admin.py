# create_admin.py

import os
import sys
from getpass import getpass

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import app
from volunteerhub.exceptions import AuthError
from volunteerhub.models import Role, User
from volunteerhub.services.auth_service import AuthService


def create_admin():
    with app.app_context():
        email = input("Enter email: ").strip()
        full_name = input("Enter full name: ").strip()

        if User.find_by_email(email):
            print("Error: Email already exists.")
            sys.exit(1)

        password = getpass("Enter password: ")
        password2 = getpass("Confirm password: ")

        if password != password2:
            print("Error: Passwords do not match.")
            sys.exit(1)

        min_length = app.config.get("MIN_PASSWORD_LENGTH", 6)
        if len(password) < min_length:
            print(f"Error: Password must be at least {min_length} characters.")
            sys.exit(1)

        try:
            admin_user = AuthService.sign_up(email, password, full_name, Role.ADMIN)
        except AuthError as e:
            print(f"Error creating admin account: {e}")
            sys.exit(1)

        print("✅ Admin account created successfully!")
        print(f"   Email: {admin_user.email}")
        print(f"   Name: {admin_user.profile.full_name}")
        print(f"   Role: {admin_user.profile.role.value}")
        print("\nNote: Admins verify organizers and approve events from /admin/dashboard.")


if __name__ == "__main__":
    create_admin()
