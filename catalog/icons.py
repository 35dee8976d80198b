"""Display icons for movie titles"""

DEFAULT_ICON = '🎬'

# First matching keyword wins
TITLE_ICONS = [
    ('prison', '🔒'),
    ('family', '👨‍👩‍👦'),
    ('hero', '🦸'),
    ('space', '🚀'),
    ('star', '⭐'),
    ('dream', '💭'),
    ('virtual', '💻'),
    ('robot', '🤖'),
    ('ocean', '🌊'),
    ('love', '❤️'),
    ('journey', '🧭'),
    ('city', '🏙️'),
    ('ghost', '👻'),
    ('king', '👑'),
    ('war', '⚔️'),
]


def get_movie_icon(movie_name):
    if not movie_name:
        return DEFAULT_ICON

    name = movie_name.lower()
    for keyword, icon in TITLE_ICONS:
        if keyword in name:
            return icon
    return DEFAULT_ICON
