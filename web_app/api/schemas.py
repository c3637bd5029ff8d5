"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from datetime import datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    log_file: str = Field(..., description="Path of the application log file")
    log_writable: bool = Field(..., description="Whether the log directory accepts writes")
    dev_mode: bool = Field(..., description="Whether debug logging is enabled")
    timestamp: datetime = Field(..., description="Check timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "log_file": "/srv/app/logs/app.log",
                    "log_writable": True,
                    "dev_mode": False,
                    "timestamp": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }
