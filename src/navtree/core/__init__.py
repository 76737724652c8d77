"""Navigation tree rendering and pagination."""
