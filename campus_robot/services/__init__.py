"""Planning, execution and broadcast services behind the HTTP/WebSocket handlers."""
