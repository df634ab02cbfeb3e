"""
Global configuration constants for the SEO Meta Tag Analyzer.
All tunable thresholds live here.
"""

# ── Title thresholds ──────────────────────────────────────────────────────────
TITLE_MIN_CHARS = 30
TITLE_MAX_CHARS = 60
TITLE_RECOMMENDED_BAND = "50-60"

# ── Description thresholds ────────────────────────────────────────────────────
DESCRIPTION_MIN_CHARS = 120
DESCRIPTION_MAX_CHARS = 160
DESCRIPTION_RECOMMENDED_BAND = "120-160"

# ── Mobile-friendliness ───────────────────────────────────────────────────────
MOBILE_WEIGHTS: dict[str, int] = {
    "viewport":          40,
    "responsive_design": 25,
    "touch_elements":    15,
    "font_readability":  10,
    "media_queries":     10,
}
MOBILE_GOOD_SCORE = 80
MOBILE_WARNING_SCORE = 50
MOBILE_EXCELLENT_SCORE = 90

# Substrings searched for in raw <style> text / inline style attributes
MEDIA_QUERY_MARKERS = ("@media",)
TOUCH_FRIENDLY_MARKERS = ("min-height", "min-width", "touch-action", "user-select")
FONT_READABILITY_MARKERS = ("em", "rem", "vh", "vw")
FLEX_MARKERS = ("flex", "display: flex")
GRID_MARKERS = ("grid", "display: grid")

# ── Page speed ────────────────────────────────────────────────────────────────
SLOW_LOAD_TIME_MS = 3000
ACCEPTABLE_LOAD_TIME_MS = 1500

# Substituted when the fetch collaborator supplies no timing data
DEFAULT_LOAD_TIME_MS = 2000
DEFAULT_RESOURCE_SIZE_KB = 500
DEFAULT_REQUEST_COUNT = 1

# Category view: linear from 100 at FAST to 0 at SLOW
PAGE_SPEED_SCORE_FAST_MS = 1000
PAGE_SPEED_SCORE_SLOW_MS = 5000

# ── Overall score deductions ──────────────────────────────────────────────────
MAX_SCORE = 100
MIN_SCORE = 0

TITLE_DEDUCTIONS: dict[str, int] = {"warning": 5, "error": 15}
DESCRIPTION_DEDUCTIONS: dict[str, int] = {"warning": 5, "error": 15}
OPEN_GRAPH_DEDUCTIONS: dict[str, int] = {"warning": 10, "error": 15}
TWITTER_DEDUCTIONS: dict[str, int] = {"warning": 10, "error": 15}
MISSING_CANONICAL_DEDUCTION = 10
MISSING_VIEWPORT_DEDUCTION = 10
MOBILE_POOR_DEDUCTION = 15          # mobile score < MOBILE_WARNING_SCORE
MOBILE_FAIR_DEDUCTION = 8           # mobile score < MOBILE_GOOD_SCORE

# ── Category scores ───────────────────────────────────────────────────────────
STATUS_POINTS: dict[str, int] = {"good": 100, "warning": 50, "error": 0}
CATEGORY_GOOD_SCORE = 80
CATEGORY_WARNING_SCORE = 50

# ── Meta tag table ────────────────────────────────────────────────────────────
DEFAULT_ROBOTS_DISPLAY = "index, follow"

# ── Fetch defaults ────────────────────────────────────────────────────────────
DEFAULT_REQUEST_TIMEOUT = 15            # seconds
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOMetaTagAnalyzer/1.0)"
DEFAULT_RECENT_LIMIT = 5

USER_AGENT_PRESETS = {
    "SEO Meta Tag Analyzer (default)": DEFAULT_USER_AGENT,
    "Googlebot": "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
    "Bingbot": "Mozilla/5.0 (compatible; bingbot/2.0; +http://www.bing.com/bingbot.htm)",
}
