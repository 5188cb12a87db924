"""
PDF styling policy.

Single source of sizes, colors, spacing and wrap widths used by the layout engine.
Sizes are in points, heights and paddings in millimetres.
"""

# Page
PAGE_MARGIN_MM = 15
GRID_COLUMNS = 12

# Fonts (reportlab built-in Type 1 families)
FONT_NAMES = {
    "normal": "Helvetica",
    "bold": "Helvetica-Bold",
    "italic": "Helvetica-Oblique",
    "bold_italic": "Helvetica-BoldOblique",
}

# Font sizes
FONT_SIZE_NAME = 26
FONT_SIZE_SUBTITLE = 18
FONT_SIZE_HEADING = 16
FONT_SIZE_SUBHEADING = 12
FONT_SIZE_NORMAL = 10
FONT_SIZE_SMALL = 8

# Line spacing as a multiple of font size
LEADING_RATIO = 1.25

# Colors (hex)
HEADER_COLOR = "#003366"  # deep blue, matches the website header
PRIMARY_COLOR = "#111827"
GRAY_COLOR = "#6B7280"
ACCENT_COLOR = "#3730A3"

# Decorative rules (fraction of column width, thickness in points)
SECTION_RULE_LENGTH = 0.4
CATEGORY_RULE_LENGTH = 0.2
RULE_THICKNESS = 1.2

# Separators
EXPERIENCE_SEPARATOR = "• • • • •"
EDUCATION_SEPARATOR = "· · ·"
BULLET = "• "
CONTINUATION_INDENT = "  "

# Wrap widths in characters
SUMMARY_WRAP_WIDTH = 95
DESCRIPTION_WRAP_WIDTH = 80
SKILLS_WRAP_WIDTH = 90
PROJECT_WRAP_WIDTH = 90

# Skills are shown in groups of this many per line
SKILL_GROUP_SIZE = 3
SKILL_SEPARATOR = "   "

# Section titles and subtitles
SECTION_SUBTITLES = {
    "Experience": "Professional work history",
    "Education": "Academic background and qualifications",
    "Skills": "Technical competencies and expertise",
    "Projects": "Selected personal and open-source work",
}
