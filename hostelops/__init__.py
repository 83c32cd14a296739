"""HostelOps API: hostel complaints, announcements and maintenance analytics."""

__version__ = "1.0.0"
