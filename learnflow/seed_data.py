"""Reference data loaded into an empty database at startup."""

from typing import Any

ACHIEVEMENTS: list[dict[str, Any]] = [
    {"name": "First Steps", "description": "Complete your first lesson", "icon": "rocket", "rarity": "common", "xp_reward": 50, "category": "learning"},  # noqa: E501
    {"name": "Quick Learner", "description": "Complete 5 lessons", "icon": "zap", "rarity": "common", "xp_reward": 100, "category": "learning"},  # noqa: E501
    {"name": "Knowledge Seeker", "description": "Complete 25 lessons", "icon": "book", "rarity": "rare", "xp_reward": 250, "category": "learning"},  # noqa: E501
    {"name": "Scholar", "description": "Complete 50 lessons", "icon": "graduation-cap", "rarity": "epic", "xp_reward": 500, "category": "learning"},  # noqa: E501
    {"name": "Quiz Novice", "description": "Pass your first quiz", "icon": "check-circle", "rarity": "common", "xp_reward": 50, "category": "quiz"},  # noqa: E501
    {"name": "Quiz Master", "description": "Pass 10 quizzes", "icon": "brain", "rarity": "rare", "xp_reward": 200, "category": "quiz"},  # noqa: E501
    {"name": "Perfect Score", "description": "Get 100% on any quiz", "icon": "star", "rarity": "rare", "xp_reward": 150, "category": "quiz"},  # noqa: E501
    {"name": "Streak Starter", "description": "3-day learning streak", "icon": "flame", "rarity": "common", "xp_reward": 75, "category": "streak"},  # noqa: E501
    {"name": "Week Warrior", "description": "7-day learning streak", "icon": "flame", "rarity": "rare", "xp_reward": 200, "category": "streak"},  # noqa: E501
    {"name": "Dedicated Learner", "description": "30-day learning streak", "icon": "flame", "rarity": "epic", "xp_reward": 1000, "category": "streak"},  # noqa: E501
    {"name": "Century Streak", "description": "100-day learning streak", "icon": "crown", "rarity": "legendary", "xp_reward": 5000, "category": "streak"},  # noqa: E501
    {"name": "Path Finder", "description": "Complete your first learning path", "icon": "map", "rarity": "rare", "xp_reward": 300, "category": "learning"},  # noqa: E501
    {"name": "Path Master", "description": "Complete 5 learning paths", "icon": "trophy", "rarity": "epic", "xp_reward": 1000, "category": "learning"},  # noqa: E501
    {"name": "Certified", "description": "Earn your first certificate", "icon": "award", "rarity": "rare", "xp_reward": 250, "category": "learning"},  # noqa: E501
    {"name": "Early Bird", "description": "Study before 8 AM", "icon": "sunrise", "rarity": "common", "xp_reward": 50, "category": "social"},  # noqa: E501
    {"name": "Night Owl", "description": "Study after 10 PM", "icon": "moon", "rarity": "common", "xp_reward": 50, "category": "social"},  # noqa: E501
    {"name": "Social Learner", "description": "Join a study room", "icon": "users", "rarity": "common", "xp_reward": 50, "category": "social"},  # noqa: E501
    {"name": "Flashcard Fan", "description": "Create 50 flashcards", "icon": "layers", "rarity": "rare", "xp_reward": 150, "category": "learning"},  # noqa: E501
    {"name": "Level 5", "description": "Reach level 5", "icon": "trending-up", "rarity": "common", "xp_reward": 100, "category": "level"},  # noqa: E501
    {"name": "Level 10", "description": "Reach level 10", "icon": "trending-up", "rarity": "rare", "xp_reward": 300, "category": "level"},  # noqa: E501
    {"name": "Level 25", "description": "Reach level 25", "icon": "trending-up", "rarity": "epic", "xp_reward": 750, "category": "level"},  # noqa: E501
    {"name": "Legend", "description": "Reach level 50", "icon": "crown", "rarity": "legendary", "xp_reward": 2500, "category": "level"},  # noqa: E501
]

CATEGORIES: list[dict[str, Any]] = [
    {"name": "Programming", "description": "Learn coding and software development", "icon": "code", "color": "#3B82F6"},  # noqa: E501
    {"name": "Web Development", "description": "Build websites and web applications", "icon": "globe", "color": "#10B981"},  # noqa: E501
    {"name": "Data Science", "description": "Analyze data and build ML models", "icon": "bar-chart", "color": "#8B5CF6"},  # noqa: E501
    {"name": "Design", "description": "UI/UX and graphic design", "icon": "palette", "color": "#F59E0B"},  # noqa: E501
    {"name": "Business", "description": "Business and entrepreneurship", "icon": "briefcase", "color": "#EF4444"},  # noqa: E501
    {"name": "Languages", "description": "Learn new languages", "icon": "languages", "color": "#EC4899"},  # noqa: E501
    {"name": "Mathematics", "description": "Math and statistics", "icon": "calculator", "color": "#06B6D4"},  # noqa: E501
    {"name": "Science", "description": "Physics, chemistry, biology", "icon": "flask", "color": "#84CC16"},  # noqa: E501
]

DEPARTMENTS: list[dict[str, Any]] = [
    {
        "id": "ai",
        "name": "Artificial Intelligence",
        "short_name": "AI & ML Technologies",
        "description": (
            "Machine Learning, Deep Learning, Neural Networks, and cutting-edge AI applications."
        ),
        "accent_color": "hsl(220, 100%, 50%)",
        "resource_count": 45,
    },
    {
        "id": "civil",
        "name": "Civil Engineering",
        "short_name": "Infrastructure & Construction",
        "description": (
            "Structural Engineering, Environmental Engineering, Transportation, "
            "and Construction Management."
        ),
        "accent_color": "hsl(25, 100%, 45%)",
        "resource_count": 62,
    },
    {
        "id": "mechanical",
        "name": "Mechanical Engineering",
        "short_name": "Manufacturing & Design",
        "description": (
            "Thermodynamics, Machine Design, Manufacturing Processes, and Automation Systems."
        ),
        "accent_color": "hsl(120, 60%, 40%)",
        "resource_count": 58,
    },
    {
        "id": "computer",
        "name": "Computer Engineering",
        "short_name": "Software & Systems",
        "description": (
            "Programming, Data Structures, Web Development, and Computer Networks fundamentals."
        ),
        "accent_color": "hsl(270, 80%, 55%)",
        "resource_count": 72,
    },
    {
        "id": "electrical",
        "name": "Electrical Engineering",
        "short_name": "Power & Control Systems",
        "description": (
            "Power Systems, Control Theory, Electric Machines, and Renewable Energy Technologies."
        ),
        "accent_color": "hsl(45, 90%, 50%)",
        "resource_count": 54,
    },
    {
        "id": "electronics",
        "name": "Electronics Engineering",
        "short_name": "Circuits & Communication",
        "description": (
            "Digital Electronics, Communication Systems, Microprocessors, and Signal Processing."
        ),
        "accent_color": "hsl(340, 75%, 50%)",
        "resource_count": 49,
    },
    {
        "id": "bigdata",
        "name": "Big Data",
        "short_name": "Data Analytics & Processing",
        "description": (
            "Big Data Analytics, Data Mining, Hadoop, Spark, and Large-scale Data Processing "
            "Systems."
        ),
        "accent_color": "hsl(200, 85%, 45%)",
        "resource_count": 32,
    },
]

SAMPLE_QUESTION_PAPERS: list[dict[str, Any]] = [
    {"title": "Data Structures & Algorithms", "subject": "Data Structures", "department_id": "computer", "semester": 3, "year": 2023, "session": "Winter", "marks": 100, "file_path": "/sample-papers/dsa-winter-2023.pdf"},  # noqa: E501
    {"title": "Engineering Mathematics III", "subject": "Mathematics", "department_id": None, "semester": 3, "year": 2023, "session": "Summer", "marks": 80, "file_path": "/sample-papers/math3-summer-2023.pdf"},  # noqa: E501
    {"title": "Machine Learning Fundamentals", "subject": "Machine Learning", "department_id": "ai", "semester": 5, "year": 2023, "session": "Winter", "marks": 80, "file_path": "/sample-papers/ml-winter-2023.pdf"},  # noqa: E501
    {"title": "Structural Analysis", "subject": "Structural Engineering", "department_id": "civil", "semester": 4, "year": 2023, "session": "Summer", "marks": 80, "file_path": "/sample-papers/structural-summer-2023.pdf"},  # noqa: E501
    {"title": "Thermodynamics", "subject": "Thermal Engineering", "department_id": "mechanical", "semester": 4, "year": 2023, "session": "Winter", "marks": 80, "file_path": "/sample-papers/thermo-winter-2023.pdf"},  # noqa: E501
    {"title": "Power Systems", "subject": "Electrical Power", "department_id": "electrical", "semester": 5, "year": 2023, "session": "Summer", "marks": 80, "file_path": "/sample-papers/power-summer-2023.pdf"},  # noqa: E501
    {"title": "Big Data Analytics", "subject": "Data Analytics", "department_id": "bigdata", "semester": 4, "year": 2023, "session": "Winter", "marks": 80, "file_path": "/sample-papers/bigdata-winter-2023.pdf"},  # noqa: E501
    {"title": "AI ML Algorithm", "subject": "Machine Learning Algorithms", "department_id": "ai", "semester": 5, "year": 2024, "session": "Summer", "marks": 70, "file_path": "https://pdflink.to/ee3c0640/"},  # noqa: E501
]

SAMPLE_STUDY_NOTES: list[dict[str, Any]] = [
    {"title": "Introduction to Algorithms", "subject": "Data Structures", "department_id": "computer", "semester": 3, "chapter": "Chapter 1: Basic Concepts", "file_path": "/sample-notes/dsa-intro.pdf"},  # noqa: E501
    {"title": "Neural Networks Basics", "subject": "Machine Learning", "department_id": "ai", "semester": 5, "chapter": "Chapter 3: Neural Networks", "file_path": "/sample-notes/neural-networks.pdf"},  # noqa: E501
    {"title": "Concrete Technology", "subject": "Construction Materials", "department_id": "civil", "semester": 3, "chapter": "Chapter 2: Concrete", "file_path": "/sample-notes/concrete-tech.pdf"},  # noqa: E501
    {"title": "Introduction to Hadoop", "subject": "Big Data Technologies", "department_id": "bigdata", "semester": 4, "chapter": "Chapter 1: Hadoop Ecosystem", "file_path": "/sample-notes/hadoop-intro.pdf"},  # noqa: E501
]
