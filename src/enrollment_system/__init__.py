"""Course Enrollment package.

Organized by feature modules (users, courses, enrollments) with a thin Flask
controller layer over service/repository layers and a JSON document store.
"""
