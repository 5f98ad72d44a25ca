"""
Campus delivery robot backend.

This service is responsible for:
- Keeping the single simulated robot's pose, mode and activity.
- Planning turn/forward command sequences between campus locations.
- Running delivery orders through queued -> in-progress -> completed/failed.
- Broadcasting full state snapshots to WebSocket observers.

The HTTP/WebSocket server is implemented with Tornado.
"""
