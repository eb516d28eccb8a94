"""Paycheck Pal package.

Tracks clock-in/clock-out work sessions and derives payable time and salary.
Organized by feature modules (records, payroll, settings) with a thin Flask
controller layer on top of service/repository layers.
"""
