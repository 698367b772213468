# volunteerhub/routes/auth.py
"""
Authentication and account settings routes
"""

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import login_user, logout_user

from volunteerhub.exceptions import AuthError, OrganizerProfileError
from volunteerhub.forms import (
    ChangePasswordForm,
    LoginForm,
    OrganizerRegistrationForm,
    ProfileForm,
    VolunteerRegistrationForm,
)
from volunteerhub.models import User
from volunteerhub.services.auth_service import AuthService
from volunteerhub.services.onboarding_service import OnboardingService
from volunteerhub.utils.permissions import dashboard_url_for, session_required
from volunteerhub.utils.session_context import SessionContext, get_session_context, set_session_context


def _first_form_error(form, default):
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return default


def _is_safe_next(target):
    return bool(target) and target.startswith("/") and not target.startswith("//")


def _start_session(user):
    """Sign the user in and rebuild the request's session context"""
    login_user(user)
    context = SessionContext(user_id=user.id).resolve()
    set_session_context(context)
    return context


def register_auth_routes(app):
    """Register authentication routes"""

    @app.route("/login", methods=["GET", "POST"])
    def login():
        context = get_session_context()
        if context.has_session:
            return redirect(dashboard_url_for(context.role))

        form = LoginForm()
        if form.validate_on_submit():
            try:
                user = AuthService.sign_in(form.email.data, form.password.data)
            except AuthError as e:
                flash(str(e), "danger")
                return render_template("auth/login.html", form=form)

            context = _start_session(user)
            flash("Welcome back!", "success")
            next_url = request.args.get("next")
            if _is_safe_next(next_url):
                return redirect(next_url)
            return redirect(dashboard_url_for(context.role))

        return render_template("auth/login.html", form=form)

    @app.route("/logout")
    def logout():
        context = get_session_context()
        logout_user()
        context.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("index"))

    @app.route("/register", methods=["GET", "POST"])
    def register():
        """Volunteer registration"""
        form = VolunteerRegistrationForm()
        if form.validate_on_submit():
            try:
                user = OnboardingService.register_volunteer(
                    form.email.data, form.password.data, form.full_name.data
                )
            except AuthError as e:
                flash(str(e) or "Registration failed", "danger")
                return render_template("auth/register.html", form=form, account_type="user")

            _start_session(user)
            flash("Account created successfully!", "success")
            return redirect(url_for("user_dashboard"))

        return render_template("auth/register.html", form=form, account_type="user")

    @app.route("/register/organizer", methods=["GET", "POST"])
    def register_organizer():
        """Organizer registration: account first, then the pending organizer row"""
        form = OrganizerRegistrationForm()
        if form.validate_on_submit():
            try:
                user, _organizer = OnboardingService.register_organizer(
                    email=form.email.data,
                    password=form.password.data,
                    full_name=form.full_name.data,
                    organization_name=form.organization_name.data,
                    contact_email=form.contact_email.data,
                    description=form.description.data,
                )
            except AuthError as e:
                flash(str(e) or "Registration failed", "danger")
                return render_template("auth/register.html", form=form, account_type="organizer")
            except OrganizerProfileError as e:
                # The account exists at this point; let the organizer finish the profile
                user = User.find_by_email(form.email.data)
                if user is not None:
                    _start_session(user)
                    flash(str(e), "danger")
                    return redirect(url_for("organizer_profile"))
                flash(str(e), "danger")
                return render_template("auth/register.html", form=form, account_type="organizer")

            _start_session(user)
            flash("Organizer account created! Awaiting admin verification.", "success")
            return redirect(url_for("organizer_dashboard"))

        return render_template("auth/register.html", form=form, account_type="organizer")

    @app.route("/settings", methods=["GET", "POST"])
    @session_required
    def settings():
        """Profile settings"""
        context = get_session_context()
        profile = context.profile
        form = ProfileForm(obj=profile) if request.method == "GET" else ProfileForm()
        password_form = ChangePasswordForm(formdata=None)

        if request.method == "POST":
            if not form.validate_on_submit():
                flash(_first_form_error(form, "Failed to update profile"), "danger")
                return render_template("settings.html", form=form, password_form=password_form, profile=profile)

            success, error = OnboardingService.update_profile(
                context.user_id,
                full_name=form.full_name.data,
                phone=form.phone.data,
                profile_image=form.profile_image.data,
            )
            if success:
                context.refresh()
                flash("Profile updated successfully", "success")
            else:
                current_app.logger.error(f"Error updating profile {context.user_id}: {error}")
                flash("Failed to update profile", "danger")
            return redirect(url_for("settings"))

        return render_template("settings.html", form=form, password_form=password_form, profile=profile)

    @app.route("/settings/password", methods=["POST"])
    @session_required
    def settings_password():
        """Change password"""
        context = get_session_context()
        form = ChangePasswordForm()
        if not form.validate_on_submit():
            flash(_first_form_error(form, "Failed to update password"), "danger")
            return redirect(url_for("settings"))

        try:
            AuthService.update_password(context.user_id, form.new_password.data, form.confirm_password.data)
        except AuthError as e:
            flash(str(e), "danger")
            return redirect(url_for("settings"))

        flash("Password updated successfully", "success")
        return redirect(url_for("settings"))
