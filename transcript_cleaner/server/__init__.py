"""HTTP API for transcript cleaning.

WHY: Editor plugins, automation tools (n8n, shortcuts), and other
services need to clean transcripts without shelling out to the CLI.

HOW: app.py defines the FastAPI app; models.py holds the pydantic
request/response schemas.
"""
