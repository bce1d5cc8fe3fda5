"""
Starter Pattern Catalog

Creates the eight seed page layouts the notebook ships with.
Artwork is a 1200x600 SVG canvas; editable fields use the same pixel space.
"""

from typing import List

from notebook_layouts.patterns.pattern_schema import LayoutPattern, PatternCategory, create_pattern

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 600

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
BOX_STROKE = "#E5E5E5"
LABEL_FILL = "#666"


def _svg(background: str, title: str, body: List[str], title_size: int = 20) -> str:
    lines = [
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{CANVAS_WIDTH}' height='{CANVAS_HEIGHT}'>",
        f"<rect width='100%' height='100%' fill='{background}'/>",
        f"<text x='50' y='25' font-size='{title_size}' fill='#2C2C2C' font-weight='bold'>{title}</text>",
    ]
    lines.extend(body)
    lines.append("</svg>")
    return "\n".join(lines)


def _box(x: int, y: int, w: int, h: int, label: str, fill: str = "none",
         stroke: str = BOX_STROKE, label_fill: str = LABEL_FILL, stroke_width: int = 2,
         font_size: int = 14) -> List[str]:
    return [
        f"<rect x='{x}' y='{y}' width='{w}' height='{h}' fill='{fill}' stroke='{stroke}' stroke-width='{stroke_width}'/>",
        f"<text x='{x + 10}' y='{y + 20}' font-size='{font_size}' fill='{label_fill}'>{label}</text>",
    ]


def create_starter_patterns() -> List[LayoutPattern]:
    """Create the seed set of notebook layout patterns"""
    patterns = []

    # 0. Bullet journal weekly spread: one column per weekday plus notes/goals
    body = []
    day_fields = []
    for i, day in enumerate(WEEKDAYS):
        x = 50 + i * 160
        body.append(f"<rect x='{x}' y='70' width='150' height='200' fill='none' stroke='{BOX_STROKE}' stroke-width='2'/>")
        body.append(f"<text x='{x + 75}' y='90' font-size='16' fill='{LABEL_FILL}' text-anchor='middle'>{day}</text>")
        day_fields.append({
            "id": f"{day.lower()}-tasks",
            "kind": "textarea",
            "x": x,
            "y": 100,
            "width": 150,
            "height": 160,
            "placeholder": f"{day} tasks...",
        })
    body += _box(50, 290, 1100, 150, "Weekly Notes")
    body += _box(50, 460, 1100, 100, "Weekly Goals")
    patterns.append(create_pattern(
        name="Bullet Journal Weekly Spread",
        category=PatternCategory.PRODUCTIVITY,
        description="Classic bullet journal weekly layout with task tracking and notes",
        keywords=["bullet", "journal", "weekly", "tasks", "productivity", "planning"],
        tags=["productivity", "weekly", "tasks", "bullet journal", "planning"],
        artwork=_svg("#FAF7F0", "Weekly Spread", body),
        elements=[
            {"id": "week-title", "kind": "text", "x": 250, "y": 5, "width": 200, "height": 30, "placeholder": "Week of..."},
            *day_fields,
            {"id": "notes", "kind": "textarea", "x": 50, "y": 300, "width": 1100, "height": 130, "placeholder": "Weekly notes..."},
            {"id": "goals", "kind": "textarea", "x": 50, "y": 470, "width": 1100, "height": 80, "placeholder": "Weekly goals..."},
        ],
        popularity=95,
    ))

    # 1. Habit tracker grid: habit names down the side, days across the top
    habits = ["Exercise", "Read", "Meditate", "Water", "Sleep"]
    body = [f"<rect x='50' y='50' width='1100' height='500' fill='none' stroke='{BOX_STROKE}' stroke-width='2'/>",
            f"<text x='60' y='70' font-size='14' fill='{LABEL_FILL}'>Habits</text>"]
    for day in range(1, 32):
        body.append(f"<text x='{180 + day * 30}' y='70' font-size='12' fill='{LABEL_FILL}'>{day}</text>")
    habit_fields = []
    for i, habit in enumerate(habits):
        y = 100 + i * 30
        body.append(f"<text x='60' y='{y}' font-size='12' fill='#333'>{habit}</text>")
        habit_fields.append({"id": f"habit-{i + 1}", "kind": "text", "x": 60, "y": y - 10,
                             "width": 100, "height": 20, "placeholder": habit})
    patterns.append(create_pattern(
        name="Habit Tracker Grid",
        category=PatternCategory.PRODUCTIVITY,
        description="Monthly habit tracking grid with progress visualization",
        keywords=["habit", "tracker", "monthly", "grid", "progress", "goals"],
        tags=["habit", "tracker", "monthly", "grid", "progress"],
        artwork=_svg("#FFFFFF", "Habit Tracker", body),
        elements=[
            {"id": "month-title", "kind": "text", "x": 250, "y": 5, "width": 200, "height": 30, "placeholder": "January"},
            *habit_fields,
        ],
        popularity=88,
    ))

    # 2. Mood tracker & journal
    body = (
        _box(50, 70, 800, 300, "How are you feeling today?")
        + _box(50, 390, 400, 150, "Three things I'm grateful for...", fill="#E8F5E8")
        + _box(470, 390, 380, 150, "Today's goals...", fill="#E8F0FF")
        + _box(50, 560, 100, 30, "Sleep (hrs)", stroke_width=1, font_size=12)
        + _box(200, 560, 100, 30, "Water (glasses)", stroke_width=1, font_size=12)
        + _box(350, 560, 100, 30, "Exercise", stroke_width=1, font_size=12)
    )
    patterns.append(create_pattern(
        name="Mood Tracker & Journal",
        category=PatternCategory.CREATIVE,
        description="Daily mood tracking with journaling space and wellness metrics",
        keywords=["mood", "journal", "wellness", "daily", "tracker", "mental health"],
        tags=["mood", "journal", "wellness", "daily", "mental health"],
        artwork=_svg("#FFF9F0", "Daily Mood &amp; Journal", body),
        elements=[
            {"id": "date", "kind": "date", "x": 300, "y": 5, "width": 150, "height": 30},
            {"id": "mood-rating", "kind": "select", "x": 500, "y": 5, "width": 200, "height": 30,
             "options": ["😢", "😔", "😐", "😊", "😄"]},
            {"id": "journal", "kind": "textarea", "x": 50, "y": 100, "width": 800, "height": 260,
             "placeholder": "How are you feeling today?"},
            {"id": "gratitude", "kind": "textarea", "x": 50, "y": 420, "width": 400, "height": 110,
             "placeholder": "Three things I'm grateful for..."},
            {"id": "goals", "kind": "textarea", "x": 470, "y": 420, "width": 380, "height": 110,
             "placeholder": "Today's goals..."},
            {"id": "sleep-hours", "kind": "number", "x": 160, "y": 560, "width": 30, "height": 30, "placeholder": "8"},
            {"id": "water-glasses", "kind": "number", "x": 310, "y": 560, "width": 30, "height": 30, "placeholder": "8"},
            {"id": "exercise", "kind": "checkbox", "x": 460, "y": 565, "width": 20, "height": 20},
        ],
        popularity=92,
    ))

    # 3. Creative sketch & notes
    body = (
        _box(50, 70, 600, 400, "Drawing Area")
        + _box(670, 70, 480, 200, "Ideas &amp; Notes")
        + _box(670, 290, 480, 180, "Color Palette")
    )
    patterns.append(create_pattern(
        name="Creative Sketch & Notes",
        category=PatternCategory.CREATIVE,
        description="Combined drawing space with note-taking areas",
        keywords=["creative", "sketch", "drawing", "notes", "art", "ideas"],
        tags=["creative", "sketch", "drawing", "art", "ideas"],
        artwork=_svg("#FFFFFF", "Creative Space", body),
        elements=[
            {"id": "title", "kind": "text", "x": 250, "y": 5, "width": 200, "height": 30, "placeholder": "Project Title"},
            {"id": "ideas", "kind": "textarea", "x": 670, "y": 100, "width": 480, "height": 160,
             "placeholder": "Ideas and notes..."},
            {"id": "colors", "kind": "textarea", "x": 670, "y": 320, "width": 480, "height": 140,
             "placeholder": "Color notes..."},
        ],
        popularity=75,
    ))

    # 4. Cornell notes: main notes, cue column, summary strip
    body = (
        _box(50, 70, 800, 400, "Main Notes")
        + _box(870, 70, 280, 400, "Cues &amp; Questions", fill="#F8F9FA")
        + _box(50, 490, 1100, 100, "Summary", fill="#F8F9FA")
    )
    patterns.append(create_pattern(
        name="Cornell Note-Taking System",
        category=PatternCategory.STUDY,
        description="Classic Cornell method for effective note-taking and review",
        keywords=["cornell", "notes", "study", "academic", "learning", "review"],
        tags=["cornell", "notes", "study", "academic", "learning"],
        artwork=_svg("#FFFFFF", "Cornell Note-Taking System", body, title_size=18),
        elements=[
            {"id": "topic", "kind": "text", "x": 350, "y": 5, "width": 300, "height": 30, "placeholder": "Topic: "},
            {"id": "date", "kind": "date", "x": 700, "y": 5, "width": 150, "height": 30},
            {"id": "notes", "kind": "textarea", "x": 50, "y": 100, "width": 800, "height": 360,
             "placeholder": "Main notes..."},
            {"id": "cues", "kind": "textarea", "x": 870, "y": 100, "width": 280, "height": 360,
             "placeholder": "Cues & Questions..."},
            {"id": "summary", "kind": "textarea", "x": 50, "y": 515, "width": 1100, "height": 70,
             "placeholder": "Summary..."},
        ],
        popularity=90,
    ))

    # 5. Mind map: central topic with four branches
    branches = [(400, 200), (680, 200), (400, 340), (680, 340)]
    body = [
        "<circle cx='600' cy='300' r='60' fill='#E8F0FF' stroke='#3B82F6' stroke-width='3'/>",
        "<text x='600' y='305' font-size='16' fill='#1E40AF' text-anchor='middle' font-weight='bold'>Central Topic</text>",
    ]
    branch_fields = []
    for i, (bx, by) in enumerate(branches, start=1):
        body.append(f"<rect x='{bx}' y='{by}' width='120' height='60' fill='#F0F9FF' stroke='#0EA5E9' stroke-width='2'/>")
        body.append(f"<text x='{bx + 60}' y='{by + 35}' font-size='12' fill='#0369A1' text-anchor='middle'>Branch {i}</text>")
        branch_fields.append({"id": f"branch-{i}", "kind": "text", "x": bx, "y": by + 20,
                              "width": 120, "height": 20, "placeholder": f"Branch {i}"})
    patterns.append(create_pattern(
        name="Mind Map Template",
        category=PatternCategory.STUDY,
        description="Central topic with branching ideas for brainstorming",
        keywords=["mind", "map", "brainstorm", "ideas", "concept", "visual"],
        tags=["mind map", "brainstorm", "ideas", "visual", "concept"],
        artwork=_svg("#FFFFFF", "Mind Map", body),
        elements=[
            {"id": "central-topic", "kind": "text", "x": 540, "y": 290, "width": 120, "height": 20,
             "placeholder": "Central Topic"},
            *branch_fields,
        ],
        popularity=82,
    ))

    # 6. Meeting notes: info strip, agenda, discussion, action items
    body = [
        "<rect x='50' y='45' width='1100' height='45' fill='#F8F9FA' stroke='#E5E5E5' stroke-width='2'/>",
        f"<text x='60' y='72' font-size='14' fill='{LABEL_FILL}'>Meeting:</text>",
        f"<text x='450' y='72' font-size='14' fill='{LABEL_FILL}'>Date:</text>",
        f"<text x='700' y='72' font-size='14' fill='{LABEL_FILL}'>Attendees:</text>",
    ]
    body += _box(50, 105, 1100, 170, "Agenda")
    body += _box(50, 290, 1100, 170, "Notes &amp; Discussion")
    body += _box(50, 475, 1100, 115, "Action Items", fill="#FFF3CD", stroke="#FFEAA7", label_fill="#856404")
    patterns.append(create_pattern(
        name="Meeting Notes Template",
        category=PatternCategory.BUSINESS,
        description="Structured meeting notes with agenda and action items",
        keywords=["meeting", "notes", "agenda", "action", "items", "business"],
        tags=["meeting", "notes", "agenda", "business", "action items"],
        artwork=_svg("#FFFFFF", "Meeting Notes", body),
        elements=[
            {"id": "meeting-title", "kind": "text", "x": 130, "y": 55, "width": 300, "height": 25,
             "placeholder": "Meeting Title"},
            {"id": "meeting-date", "kind": "date", "x": 500, "y": 55, "width": 180, "height": 25},
            {"id": "attendees", "kind": "text", "x": 790, "y": 55, "width": 350, "height": 25,
             "placeholder": "Attendees"},
            {"id": "agenda", "kind": "textarea", "x": 50, "y": 135, "width": 1100, "height": 130,
             "placeholder": "Meeting agenda..."},
            {"id": "notes", "kind": "textarea", "x": 50, "y": 320, "width": 1100, "height": 130,
             "placeholder": "Notes and discussion..."},
            {"id": "action-items", "kind": "textarea", "x": 50, "y": 505, "width": 1100, "height": 75,
             "placeholder": "Action items..."},
        ],
        popularity=87,
    ))

    # 7. Workout & nutrition tracker
    body = (
        _box(50, 70, 500, 300, "Workout")
        + _box(570, 70, 580, 150, "Meals")
        + _box(570, 240, 580, 130, "Hydration &amp; Supplements")
        + _box(50, 390, 1100, 100, "Notes &amp; Observations")
        + _box(50, 510, 1100, 80, "Goals for Tomorrow", fill="#E8F5E8", stroke="#4CAF50", label_fill="#2E7D32")
    )
    patterns.append(create_pattern(
        name="Workout & Nutrition Tracker",
        category=PatternCategory.FITNESS,
        description="Daily workout log with nutrition tracking",
        keywords=["workout", "fitness", "nutrition", "exercise", "health", "tracker"],
        tags=["workout", "fitness", "nutrition", "health", "tracker"],
        artwork=_svg("#FFFFFF", "Daily Fitness Tracker", body),
        elements=[
            {"id": "date", "kind": "date", "x": 350, "y": 5, "width": 150, "height": 30},
            {"id": "workout-type", "kind": "select", "x": 550, "y": 5, "width": 200, "height": 30,
             "options": ["Cardio", "Strength", "Yoga", "HIIT", "Rest"]},
            {"id": "workout", "kind": "textarea", "x": 50, "y": 100, "width": 500, "height": 260,
             "placeholder": "Workout details..."},
            {"id": "meals", "kind": "textarea", "x": 570, "y": 100, "width": 580, "height": 110,
             "placeholder": "Meals and snacks..."},
            {"id": "hydration", "kind": "textarea", "x": 570, "y": 270, "width": 580, "height": 90,
             "placeholder": "Water intake and supplements..."},
            {"id": "notes", "kind": "textarea", "x": 50, "y": 420, "width": 1100, "height": 60,
             "placeholder": "Notes and observations..."},
            {"id": "goals", "kind": "textarea", "x": 50, "y": 540, "width": 1100, "height": 45,
             "placeholder": "Goals for tomorrow..."},
        ],
        popularity=79,
    ))

    return patterns
