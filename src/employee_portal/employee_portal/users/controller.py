from __future__ import annotations

from flask import Flask, jsonify, render_template

from ..common.http import request_payload, status_for
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/register", endpoint="register_page")
    def register_page():
        return render_template("register.html", active_page="register")

    @app.route("/login", endpoint="login_page")
    def login_page():
        return render_template("login.html", active_page="login")

    @app.route("/profile", endpoint="profile_page")
    def profile_page():
        return render_template("profile.html", active_page="profile")

    @app.route("/edit-profile.html", endpoint="edit_profile_page")
    def edit_profile_page():
        return render_template("edit_profile.html", active_page="profile")

    @app.route("/contact", endpoint="contact_page")
    def contact_page():
        return render_template("contact.html", active_page="contact")

    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        try:
            container.auth_service.register(request_payload())
            return "Registration successful!", 201
        except DomainError as e:
            return str(e), status_for(e)
        except Exception:
            app.logger.exception("Error during registration")
            return "Server error during registration.", 500

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        try:
            result = container.auth_service.login(request_payload())
            return jsonify(result.to_dict()), 200
        except DomainError as e:
            return str(e), status_for(e)
        except Exception:
            app.logger.exception("Error during login")
            return "Server error during login.", 500

    @app.route("/api/profile/<email>", methods=["GET"], endpoint="api_profile")
    def api_profile(email: str):
        try:
            return jsonify(container.profile_service.get_profile(email))
        except DomainError as e:
            return jsonify({"message": str(e)}), status_for(e)
        except Exception:
            app.logger.exception("Error fetching profile data")
            return jsonify({"message": "Server error while fetching profile data."}), 500

    @app.route("/api/profile/update", methods=["PUT"], endpoint="api_profile_update")
    def api_profile_update():
        try:
            container.profile_service.update_profile(request_payload())
            return "Profile updated successfully!", 200
        except DomainError as e:
            return str(e), status_for(e)
        except Exception:
            app.logger.exception("Error during profile update")
            return "Server error during profile update.", 500

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        # No server-side session to drop; the browser forgets the user itself.
        return "Logged out successfully.", 200
