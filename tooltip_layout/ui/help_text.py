# tooltip_layout/ui/help_text.py
"""
Reusable help strings for UI tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_MASK = "SVG with width/height on the root and one <ellipse> per region."
TOOLTIP_CANVAS_HEIGHT = "Canvas height in px; width follows the mask aspect ratio."
TOOLTIP_LABEL_SIZE = "Label rectangle size in canvas px. Stays fixed when the canvas is resized."
TOOLTIP_BOUNDS_MODE = "symmetric keeps every label fully on the canvas; legacy reproduces the older top/bottom check."
TOOLTIP_MAX_EXPANSIONS = "Stop the search after this many steps (0 = no limit)."
TOOLTIP_GUESSES = "Click positions in canvas px; regions containing a guess are drawn in green."

GLOSSARY_MD = """
### Region
An ellipse on the image that needs a label next to it.

### Candidate
One trial label position next to a region: on the canvas and clear of every other region.
Up to 60 per region: 8 slides along each side plus 28 corner anchors around the boundary.

### Tag
Which side (0 top, 1 right, 2 bottom, 3 left) or boundary corner (4-7) produced a label.

### Infeasible
No choice of one candidate per region avoids every overlap. No labels are drawn.
"""
