from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import AuthenticatedAs
from ..common.payloads import parse_new_course
from ..container import Container
from ..core.enums import Role
from ..web.auth import role_required
from ..web.http import json_body


def register(app: Flask, container: Container) -> None:
    @app.route("/courses", methods=["GET"], endpoint="list_courses")
    @role_required(container, Role.ADMIN)
    def list_courses(caller: AuthenticatedAs):
        return jsonify([c.to_record() for c in container.course_service.list_courses(caller)])

    @app.route("/courses", methods=["POST"], endpoint="create_course")
    @role_required(container, Role.ADMIN)
    def create_course(caller: AuthenticatedAs):
        data = parse_new_course(json_body())
        course = container.course_service.provision_course(caller, data)
        return jsonify(course.to_record()), 201
