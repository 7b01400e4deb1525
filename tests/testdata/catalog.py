MARK_HAMILL = "p1"
HARRISON_FORD = "p2"
GEORGE_LUCAS = "p3"
LAWRENCE_KASDAN = "p4"
NO_CREDITS = "p5"
STEVEN_SPIELBERG = "p7"

STAR_WARS = "f1"
COMIC_BOOK = "f2"
WITNESS = "f3"
RAIDERS = "f4"
EMPIRE = "f5"

persons = [
    {"id": MARK_HAMILL, "full_name": "Mark Hamill"},
    {"id": HARRISON_FORD, "full_name": "Harrison Ford"},
    {"id": GEORGE_LUCAS, "full_name": "George Lucas"},
    {"id": LAWRENCE_KASDAN, "full_name": "Lawrence Kasdan"},
    {"id": NO_CREDITS, "full_name": "Mark Nobody"},
    {"id": STEVEN_SPIELBERG, "full_name": "Steven Spielberg"},
]


def _ref(person_id: str) -> dict:
    name = next(p["full_name"] for p in persons if p["id"] == person_id)
    return {"id": person_id, "name": name}


# порядок вставки = порядок выдачи ES без сортировки
movies = [
    {
        "id": STAR_WARS,
        "title": "Star Wars",
        "rating": 8.0,
        "type": "movie",
        "release_date": "1977-05-25",
        "description": "Luke Skywalker joins forces with a Jedi Knight",
        "genres": ["Action", "Sci-Fi"],
        "actors": [_ref(MARK_HAMILL), _ref(HARRISON_FORD)],
        "directors": [_ref(GEORGE_LUCAS)],
        "writers": [_ref(GEORGE_LUCAS)],
    },
    {
        "id": COMIC_BOOK,
        "title": "Comic Book: The Movie",
        "rating": 6.5,
        "type": "movie",
        "description": "A comic book fan makes a documentary",
        "genres": [{"id": "g3", "name": "Comedy"}],
        "actors": [],
        "directors": [_ref(MARK_HAMILL)],
        "writers": [],
    },
    {
        "id": WITNESS,
        "title": "Witness",
        "rating": 5.0,
        "type": "movie",
        "description": "A detective protects an Amish boy",
        "genres": ["Drama"],
        "actors": [_ref(HARRISON_FORD)],
        "directors": [],
        "writers": [],
    },
    {
        "id": RAIDERS,
        "title": "Raiders of the Lost Ark",
        "rating": 9.1,
        "type": "movie",
        "description": "Archaeologist Indiana Jones races the Nazis",
        "genres": ["Action", "Adventure"],
        "actors": [_ref(HARRISON_FORD)],
        "directors": [_ref(STEVEN_SPIELBERG)],
        "writers": [_ref(LAWRENCE_KASDAN)],
    },
    {
        "id": EMPIRE,
        "title": "The Empire Strikes Back",
        "rating": 8.7,
        "type": "movie",
        "description": "The Rebels are scattered after the Empire attacks",
        "genres": ["Action", "Sci-Fi"],
        "actors": [_ref(HARRISON_FORD)],
        "directors": [],
        "writers": [_ref(LAWRENCE_KASDAN)],
    },
]

genres = [
    {"id": "g1", "name": "Action", "description": "Fights and chases"},
    {"id": "g2", "name": "Sci-Fi", "description": "Space and science fiction"},
    {"id": "g3", "name": "Comedy", "description": "Funny films"},
    {"id": "g4", "name": "Drama"},
]


def documents() -> dict:
    return {"movies": movies, "genres": genres, "persons": persons}
