from __future__ import annotations

import logging
from datetime import date

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from ..common.http import error_response, json_body, make_token_required
from ..container import Container
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .export import check_export_format, employees_to_csv, employees_to_json

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)
    employees = container.employee_service

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @token_required
    def list_employees():
        try:
            if any(k in request.args for k in ("q", "status", "department")):
                items = employees.search(
                    q=request.args.get("q"),
                    status=request.args.get("status"),
                    department=request.args.get("department"),
                )
            else:
                items = employees.list_employees()
            return jsonify({"employees": [e.to_record() for e in items]})
        except Exception:
            logger.exception("Error fetching employees")
            return error_response("Failed to fetch employees", 500)

    @app.route("/employees/export", methods=["GET"], endpoint="export_employees")
    @token_required
    def export_employees():
        try:
            fmt = check_export_format(request.args.get("format"))
            records = employees.all_records()
            if fmt == "json":
                return jsonify({"employees": employees_to_json(records)})

            filename = f"employees-{date.today().isoformat()}.csv"
            return Response(
                employees_to_csv(records),
                mimetype="text/csv",
                headers={"Content-Disposition": f'attachment; filename="{filename}"'},
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Error exporting employees")
            return error_response("Failed to export employees", 500)

    @app.route("/employees/bulk-update", methods=["POST"], endpoint="bulk_update_employees")
    @token_required
    def bulk_update_employees():
        try:
            body = json_body()
            if not isinstance(body, dict):
                raise ValidationError("Request body must be a JSON object")
            result = employees.bulk_update(body.get("employeeIds"), body.get("updates"), user_id=g.user_id)
            return jsonify(result.to_dict())
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Error in bulk update")
            return error_response("Failed to perform bulk update", 500)

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @token_required
    def get_employee(employee_id: str):
        try:
            return jsonify({"employee": employees.get_employee(employee_id).to_record()})
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Error fetching employee %s", employee_id)
            return error_response("Failed to fetch employee", 500)

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    @token_required
    def create_employee():
        try:
            employee = employees.create_employee(json_body(), user_id=g.user_id)
            return jsonify({"employee": employee.to_record()}), 201
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Error creating employee")
            return error_response("Failed to create employee", 500)

    @app.route("/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @token_required
    def update_employee(employee_id: str):
        try:
            employee = employees.update_employee(employee_id, json_body(), user_id=g.user_id)
            return jsonify({"employee": employee.to_record()})
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Error updating employee %s", employee_id)
            return error_response("Failed to update employee", 500)

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @token_required
    def delete_employee(employee_id: str):
        try:
            employees.delete_employee(employee_id, user_id=g.user_id)
            return jsonify({"message": "Employee deleted successfully"})
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Error deleting employee %s", employee_id)
            return error_response("Failed to delete employee", 500)

    @app.route("/employees/<employee_id>/photo", methods=["POST"], endpoint="upload_employee_photo")
    @token_required
    def upload_employee_photo(employee_id: str):
        try:
            file = request.files.get("photo")
            url = container.photo_service.upload_photo(
                employee_id,
                filename=file.filename if file else None,
                content_type=file.mimetype if file else None,
                data=file.read() if file else None,
                user_id=g.user_id,
            )
            return jsonify({"message": "Photo uploaded successfully", "profilePicture": url})
        except RequestEntityTooLarge:
            return error_response("File size too large. Maximum 5MB allowed", 413)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except StorageError:
            logger.exception("Upload error for employee %s", employee_id)
            return error_response("Failed to upload file", 500)
        except Exception:
            logger.exception("Error uploading photo for employee %s", employee_id)
            return error_response("Failed to upload photo", 500)
