"""
Application-wide constants.

Centralizes magic numbers and strings to improve maintainability.
"""

# =============================================================================
# Admin Sessions
# =============================================================================

SESSION_COOKIE_NAME = "admin_session"

# =============================================================================
# Category Tree Rendering
# =============================================================================

# Row indentation in pixels: depth * step + base
TREE_INDENT_STEP_PX = 24
TREE_INDENT_BASE_PX = 8

# =============================================================================
# Notifications
# =============================================================================

MSG_CATEGORY_CREATED = "Category created successfully"
MSG_CATEGORY_UPDATED = "Category updated"
MSG_CATEGORY_DELETED = "Category deleted"
MSG_SUBTITLE_ADDED = "Subtitle added successfully"
MSG_SUBTITLE_UPDATED = "Subtitle updated"
MSG_SUBTITLE_DELETED = "Subtitle deleted"

MSG_NAME_REQUIRED = "Category name is required"
MSG_ID_MISSING = "ID is missing"
