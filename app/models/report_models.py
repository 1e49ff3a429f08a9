"""
app/models/report_models.py

Pydantic DTOs for the report catalogue endpoints.
Both endpoints return bare JSON arrays; only the item shape is modelled.
"""

from pydantic import BaseModel


class ReportItem(BaseModel):
    """
    One entry of GET /api/project-reports.

        {
            "name": "Annual Report 2023",
            "file": "/ProjectReports2/Finance/Annual_Report_2023.pdf"
        }
    """

    name: str
    file: str
