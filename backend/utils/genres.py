from typing import Dict, Iterable, List, Tuple

# TMDB movie genre ids, see https://api.themoviedb.org/3/genre/movie/list
ACTION = 28
ADVENTURE = 12
ANIMATION = 16
COMEDY = 35
CRIME = 80
DOCUMENTARY = 99
DRAMA = 18
FAMILY = 10751
FANTASY = 14
HISTORY = 36
HORROR = 27
MUSIC = 10402
MYSTERY = 9648
ROMANCE = 10749
SCIENCE_FICTION = 878
TV_MOVIE = 10770
THRILLER = 53
WAR = 10752
WESTERN = 37

GENRE_DESCRIPTIONS: Dict[str, str] = {
    "Action": "High-energy films with fights, chases, explosions, and physical stunts.",
    "Adventure": "Exciting journeys and quests, often in exotic locations.",
    "Animation": "Animated films using 2D, 3D or stop-motion, for kids and adults alike.",
    "Biography": "True stories about real people's lives.",
    "Comedy": "Films designed to make you laugh, from slapstick to dark humor.",
    "Crime": "Stories involving criminals, heists, or law enforcement.",
    "Documentary": "Non-fiction films exploring real events, people, or topics.",
    "Drama": "Serious, plot-driven stories with realistic characters and emotional themes.",
    "Family": "Films suitable for all ages, often with positive messages.",
    "Fantasy": "Magical worlds with supernatural elements.",
    "Film-Noir": "Dark, stylized crime dramas typically from the 1940s-50s.",
    "Game-Show": "Televised competition programs where contestants play games for prizes.",
    "History": "Period pieces set in the past, often depicting historical events.",
    "Horror": "Scary movies designed to frighten and create suspense.",
    "Music": "Films where music is central to the story, including concert films.",
    "Musical": "Movies where characters sing and dance to advance the plot.",
    "Mystery": "Puzzle-solving films with secrets to uncover.",
    "News": "Broadcast journalism and news programs.",
    "Reality-TV": "Unscripted shows featuring real people in various situations.",
    "Romance": "Love stories and relationships as the central theme.",
    "Sci-Fi": "Science fiction exploring futuristic concepts, space, or technology.",
    "Short": "Films typically under 40 minutes.",
    "Sport": "Athletics-focused films about athletes, teams, or sporting events.",
    "Talk-Show": "Interview-format programs with hosts and guests.",
    "Thriller": "Suspenseful films that keep you on edge.",
    "War": "Military conflicts and their impact.",
    "Western": "Stories of the American Old West.",
}

# Declaration order doubles as the tie-break order when sorting by score.
GENRES: Tuple[str, ...] = tuple(GENRE_DESCRIPTIONS)

GENRE_NAME_TO_TMDB_ID: Dict[str, List[int]] = {
    "Action": [ACTION],
    "Adventure": [ADVENTURE],
    "Animation": [ANIMATION],
    "Biography": [HISTORY, DRAMA],
    "Comedy": [COMEDY],
    "Crime": [CRIME],
    "Documentary": [DOCUMENTARY],
    "Drama": [DRAMA],
    "Family": [FAMILY],
    "Fantasy": [FANTASY],
    "Film-Noir": [CRIME, THRILLER],
    "Game-Show": [],
    "History": [HISTORY],
    "Horror": [HORROR],
    "Music": [MUSIC],
    "Musical": [MUSIC],
    "Mystery": [MYSTERY],
    "News": [],
    "Reality-TV": [],
    "Romance": [ROMANCE],
    "Sci-Fi": [SCIENCE_FICTION],
    "Short": [],
    "Sport": [DRAMA],
    "Talk-Show": [],
    "Thriller": [THRILLER],
    "War": [WAR],
    "Western": [WESTERN],
}

TMDB_ID_TO_GENRE_NAME: Dict[int, str] = {
    ACTION: "Action",
    ADVENTURE: "Adventure",
    ANIMATION: "Animation",
    COMEDY: "Comedy",
    CRIME: "Crime",
    DOCUMENTARY: "Documentary",
    DRAMA: "Drama",
    FAMILY: "Family",
    FANTASY: "Fantasy",
    HISTORY: "History",
    HORROR: "Horror",
    MUSIC: "Music",
    MYSTERY: "Mystery",
    ROMANCE: "Romance",
    SCIENCE_FICTION: "Sci-Fi",
    TV_MOVIE: "TV Movie",
    THRILLER: "Thriller",
    WAR: "War",
    WESTERN: "Western",
}


def get_genre_ids(genre_names: Iterable[str]) -> List[int]:
    """Map app genre names to TMDB ids, keeping first-seen order and dropping duplicates."""
    ids: List[int] = []
    for name in genre_names:
        for genre_id in GENRE_NAME_TO_TMDB_ID.get(name, []):
            if genre_id not in ids:
                ids.append(genre_id)
    return ids


def get_category_name(genre_ids: Iterable[int]) -> str:
    names = [TMDB_ID_TO_GENRE_NAME[i] for i in genre_ids if i in TMDB_ID_TO_GENRE_NAME]
    if not names:
        return "General"
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return "/".join(names)
    return f"{'/'.join(names[:2])} & More"
