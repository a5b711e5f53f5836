"""
SmileCare Clinic Booking

A FastAPI-based booking service for a dental clinic: clients register and
book appointments, staff review patients and the appointment book.
"""

__version__ = "1.0.0"
