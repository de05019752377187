"""Exam Attendance package.

Feature modules (exams, students, seating, attendance, reports) with a thin Flask
controller layer on top of service/repository layers.
"""
