from typing import Dict, List, Tuple

from domain.entities import Movie


def _movie(title: str, year: int, rating: float, description: str, genres: Tuple[str, ...] = ()) -> Movie:
    return Movie(
        title=title,
        year=year,
        rating_value=rating,
        description=description,
        genres=list(genres) or None,
    )


WAR_DRAMA: List[Movie] = [
    _movie("Saving Private Ryan", 1998, 8.6, "Following D-Day, soldiers search for a paratrooper whose brothers have been killed.", ("War", "Drama")),
    _movie("1917", 2019, 8.2, "Two soldiers race against time to deliver a message that will stop a deadly attack.", ("War", "Drama")),
    _movie("Dunkirk", 2017, 7.8, "Allied soldiers are evacuated from beaches during WWII as German forces close in.", ("War", "Drama")),
    _movie("The Thin Red Line", 1998, 7.6, "The battle of Guadalcanal seen through the eyes of several soldiers.", ("War", "Drama")),
    _movie("Apocalypse Now", 1979, 8.4, "A captain travels into Cambodia to assassinate a renegade colonel during the Vietnam War.", ("War", "Drama")),
    _movie("Full Metal Jacket", 1987, 8.3, "A pragmatic Marine observes the dehumanizing effects of the Vietnam War on fellow recruits.", ("War", "Drama")),
    _movie("Platoon", 1986, 8.1, "A young soldier in Vietnam faces a moral crisis when confronted with the horrors of war.", ("War", "Drama")),
    _movie("The Deer Hunter", 1978, 8.1, "An in-depth examination of how the Vietnam War impacts the lives of people in a small town.", ("War", "Drama")),
    _movie("Black Hawk Down", 2001, 7.7, "The story of a U.S. military raid in Somalia that went disastrously wrong.", ("War", "Drama")),
    _movie("Hacksaw Ridge", 2016, 8.1, "A WWII medic serves on the battlefield without a weapon, saving 75 men.", ("War", "Drama")),
]

HISTORICAL_WAR_DRAMA: List[Movie] = [
    _movie("Schindler's List", 1993, 9.0, "A German businessman saves over a thousand Polish-Jewish refugees during the Holocaust.", ("History", "Drama")),
    _movie("The Pianist", 2002, 8.5, "A Polish Jewish musician struggles to survive the destruction of the Warsaw ghetto.", ("History", "Drama", "War")),
    _movie("Glory", 1989, 7.8, "The story of the first all-African-American regiment in the Civil War.", ("History", "War")),
    _movie("Lawrence of Arabia", 1962, 8.3, "T.E. Lawrence and his experiences in the Arabian Peninsula during WWI.", ("History", "Adventure")),
    _movie("Paths of Glory", 1957, 8.4, "A colonel defends three scapegoats on trial for cowardice during WWI.", ("War", "Drama")),
    _movie("All Quiet on the Western Front", 2022, 7.8, "A young German soldier's terrifying experiences on the Western Front during WWI.", ("War", "History")),
    _movie("The Bridge on the River Kwai", 1957, 8.1, "British POWs are forced to build a bridge for their Japanese captors in WWII.", ("War", "Drama")),
    _movie("Enemy at the Gates", 2001, 7.6, "A Russian and a German sniper play cat-and-mouse during the Battle of Stalingrad.", ("War", "History")),
    _movie("Letters from Iwo Jima", 2006, 7.8, "The Battle of Iwo Jima from the perspective of the Japanese.", ("War", "History")),
    _movie("Master and Commander", 2003, 7.5, "During the Napoleonic Wars, a British frigate pursues a French warship.", ("War", "Adventure")),
]

CRIME_DRAMA_MYSTERY: List[Movie] = [
    _movie("The Godfather", 1972, 9.2, "The aging patriarch of a crime dynasty transfers control to his son.", ("Crime", "Drama")),
    _movie("The Departed", 2006, 8.5, "An undercover cop and a mole in the police try to identify each other.", ("Crime", "Thriller")),
    _movie("Heat", 1995, 8.3, "A group of professional bank robbers face off against a dedicated detective.", ("Crime", "Drama")),
    _movie("Casino", 1995, 8.2, "A tale of greed and deception in Las Vegas casinos.", ("Crime", "Drama")),
    _movie("Scarface", 1983, 8.3, "A Cuban immigrant rises to power in Miami's drug underworld.", ("Crime", "Drama")),
]

SINGLE_GENRE: Dict[str, List[Movie]] = {
    "Action": [
        _movie("Mad Max: Fury Road", 2015, 8.1, "A drifter and a rebel warrior flee a tyrant across a desert wasteland.", ("Action",)),
        _movie("Die Hard", 1988, 8.2, "A New York cop takes on terrorists who seize a Los Angeles skyscraper.", ("Action",)),
        _movie("The Dark Knight", 2008, 9.0, "Batman faces the Joker, a criminal mastermind who plunges Gotham into chaos.", ("Action", "Crime")),
    ],
    "Adventure": [
        _movie("Raiders of the Lost Ark", 1981, 8.4, "An archaeologist races the Nazis to find the Ark of the Covenant.", ("Adventure",)),
        _movie("The Lord of the Rings: The Fellowship of the Ring", 2001, 8.9, "A hobbit sets out to destroy a ring of terrible power.", ("Adventure", "Fantasy")),
        _movie("Jurassic Park", 1993, 8.2, "A theme park of cloned dinosaurs breaks loose during a preview tour.", ("Adventure",)),
    ],
    "Animation": [
        _movie("Spirited Away", 2001, 8.6, "A girl wanders into a world of spirits and must free herself and her parents.", ("Animation",)),
        _movie("Toy Story", 1995, 8.3, "A cowboy doll feels threatened when a new spaceman figure arrives.", ("Animation",)),
        _movie("Spider-Man: Into the Spider-Verse", 2018, 8.4, "A teenager becomes Spider-Man and meets his counterparts from other dimensions.", ("Animation",)),
    ],
    "Biography": [
        _movie("The Social Network", 2010, 7.8, "The founding of Facebook and the lawsuits that followed.", ("Drama", "History")),
        _movie("Bohemian Rhapsody", 2018, 7.9, "The story of Queen and lead singer Freddie Mercury.", ("Music", "Drama")),
        _movie("The Theory of Everything", 2014, 7.7, "The life of physicist Stephen Hawking and his first wife Jane.", ("Drama", "Romance")),
    ],
    "Comedy": [
        _movie("The Grand Budapest Hotel", 2014, 8.1, "A concierge and his lobby boy are framed for murder.", ("Comedy",)),
        _movie("Groundhog Day", 1993, 8.0, "A weatherman relives the same day over and over.", ("Comedy", "Romance")),
        _movie("Superbad", 2007, 7.6, "Two friends try to make the most of their last weeks of high school.", ("Comedy",)),
    ],
    "Crime": [
        _movie("Goodfellas", 1990, 8.7, "The rise and fall of a mob associate over three decades.", ("Crime", "Drama")),
        _movie("Pulp Fiction", 1994, 8.9, "Interlocking stories of hitmen, a boxer and a gangster's wife in Los Angeles.", ("Crime", "Thriller")),
        _movie("Se7en", 1995, 8.6, "Two detectives hunt a serial killer who uses the seven deadly sins as motives.", ("Crime", "Mystery")),
    ],
    "Documentary": [
        _movie("Free Solo", 2018, 8.1, "Alex Honnold attempts to climb El Capitan without ropes.", ("Documentary",)),
        _movie("Man on Wire", 2008, 7.7, "Philippe Petit's high-wire walk between the Twin Towers.", ("Documentary",)),
        _movie("Jiro Dreams of Sushi", 2011, 7.8, "An 85-year-old sushi master and his quest for perfection.", ("Documentary",)),
    ],
    "Drama": [
        _movie("The Shawshank Redemption", 1994, 9.3, "Two imprisoned men bond over a number of years.", ("Drama",)),
        _movie("Forrest Gump", 1994, 8.8, "A kind man witnesses and influences decades of American history.", ("Drama", "Romance")),
        _movie("Whiplash", 2014, 8.5, "A young drummer is pushed to his limits by a ruthless instructor.", ("Drama", "Music")),
    ],
    "Family": [
        _movie("Paddington 2", 2017, 7.8, "Paddington is framed for the theft of a rare pop-up book.", ("Family", "Comedy")),
        _movie("E.T. the Extra-Terrestrial", 1982, 7.9, "A boy befriends a stranded alien and helps him get home.", ("Family", "Sci-Fi")),
        _movie("The Princess Bride", 1987, 8.0, "A farmhand turned pirate sets out to rescue his true love.", ("Family", "Adventure")),
    ],
    "Fantasy": [
        _movie("Pan's Labyrinth", 2006, 8.2, "In post-civil-war Spain, a girl escapes into an eerie fantasy world.", ("Fantasy", "Drama")),
        _movie("Harry Potter and the Prisoner of Azkaban", 2004, 7.9, "Harry learns an escaped prisoner may be coming for him.", ("Fantasy", "Adventure")),
        _movie("The Lord of the Rings: The Return of the King", 2003, 9.0, "The final battle for Middle-earth begins.", ("Fantasy", "Adventure")),
    ],
    "Film-Noir": [
        _movie("Double Indemnity", 1944, 8.3, "An insurance salesman is drawn into a murder plot by a seductive housewife.", ("Crime", "Thriller")),
        _movie("The Maltese Falcon", 1941, 8.0, "A private detective tangles with rogues hunting a priceless statuette.", ("Crime", "Mystery")),
        _movie("Sunset Boulevard", 1950, 8.4, "A screenwriter is drawn into the world of a faded silent-film star.", ("Drama",)),
    ],
    "History": [
        _movie("Braveheart", 1995, 8.3, "William Wallace leads the Scottish uprising against English rule.", ("History", "War")),
        _movie("Gladiator", 2000, 8.5, "A betrayed Roman general seeks vengeance as a gladiator.", ("History", "Action")),
        _movie("Amadeus", 1984, 8.4, "The rivalry between Mozart and the composer Antonio Salieri.", ("History", "Music")),
    ],
    "Horror": [
        _movie("The Shining", 1980, 8.4, "A writer's winter as a hotel caretaker descends into madness.", ("Horror",)),
        _movie("Get Out", 2017, 7.8, "A young man uncovers a disturbing secret at his girlfriend's family estate.", ("Horror", "Mystery")),
        _movie("Alien", 1979, 8.5, "The crew of a space freighter is hunted by a deadly creature.", ("Horror", "Sci-Fi")),
    ],
    "Music": [
        _movie("Amadeus", 1984, 8.4, "The rivalry between Mozart and the composer Antonio Salieri.", ("Music", "History")),
        _movie("Walk the Line", 2005, 7.8, "The early career of Johnny Cash and his romance with June Carter.", ("Music", "Drama")),
        _movie("Sing Street", 2016, 7.9, "A Dublin teenager starts a band to impress a girl.", ("Music", "Comedy")),
    ],
    "Musical": [
        _movie("La La Land", 2016, 8.0, "A jazz pianist and an aspiring actress fall in love in Los Angeles.", ("Music", "Romance")),
        _movie("Singin' in the Rain", 1952, 8.3, "A silent-film star navigates Hollywood's switch to talkies.", ("Music", "Comedy")),
        _movie("West Side Story", 1961, 7.6, "Romance blossoms between members of two rival New York gangs.", ("Music", "Romance")),
    ],
    "Mystery": [
        _movie("Knives Out", 2019, 7.9, "A detective investigates the death of a wealthy crime novelist.", ("Mystery", "Comedy")),
        _movie("Gone Girl", 2014, 8.1, "A man becomes the prime suspect when his wife disappears.", ("Mystery", "Thriller")),
        _movie("Memento", 2000, 8.4, "A man with short-term memory loss hunts his wife's killer.", ("Mystery", "Thriller")),
    ],
    "Romance": [
        _movie("Before Sunrise", 1995, 8.1, "Two strangers spend one night walking and talking in Vienna.", ("Romance", "Drama")),
        _movie("Eternal Sunshine of the Spotless Mind", 2004, 8.3, "A couple undergo a procedure to erase each other from memory.", ("Romance", "Sci-Fi")),
        _movie("When Harry Met Sally...", 1989, 7.7, "Two friends wonder whether men and women can just be friends.", ("Romance", "Comedy")),
    ],
    "Sci-Fi": [
        _movie("Interstellar", 2014, 8.7, "A team of explorers travel through a wormhole in space.", ("Sci-Fi", "Drama")),
        _movie("The Matrix", 1999, 8.7, "A hacker learns the true nature of his reality.", ("Sci-Fi", "Action")),
        _movie("Blade Runner 2049", 2017, 8.0, "A blade runner unearths a secret that could plunge society into chaos.", ("Sci-Fi", "Thriller")),
    ],
    "Sport": [
        _movie("Rocky", 1976, 8.1, "A small-time boxer gets a shot at the heavyweight title.", ("Drama",)),
        _movie("Remember the Titans", 2000, 7.8, "A newly integrated high-school football team in 1971 Virginia.", ("Drama",)),
        _movie("Moneyball", 2011, 7.6, "A general manager rebuilds a baseball team on a tight budget.", ("Drama",)),
    ],
    "Thriller": [
        _movie("The Silence of the Lambs", 1991, 8.6, "An FBI trainee seeks a cannibal killer's help to catch another murderer.", ("Thriller", "Crime")),
        _movie("Prisoners", 2013, 8.1, "A father takes matters into his own hands when his daughter goes missing.", ("Thriller", "Mystery")),
        _movie("No Country for Old Men", 2007, 8.2, "A hunter stumbles on drug money and is pursued by a relentless killer.", ("Thriller", "Crime")),
    ],
    "War": [
        _movie("Come and See", 1985, 8.4, "A Belarusian boy witnesses the horrors of the Nazi occupation.", ("War", "Drama")),
        _movie("Das Boot", 1981, 8.4, "The claustrophobic life of a German U-boat crew in WWII.", ("War", "Drama")),
        _movie("The Great Escape", 1963, 8.2, "Allied prisoners plan a mass breakout from a German POW camp.", ("War", "Adventure")),
    ],
    "Western": [
        _movie("The Good, the Bad and the Ugly", 1966, 8.8, "Three gunslingers compete to find buried Confederate gold.", ("Western",)),
        _movie("Unforgiven", 1992, 8.2, "A retired gunslinger takes on one last job.", ("Western", "Drama")),
        _movie("True Grit", 2010, 7.6, "A girl hires a tough marshal to track down her father's killer.", ("Western", "Adventure")),
    ],
}

CROWD_FAVORITES: List[Movie] = [
    _movie("The Shawshank Redemption", 1994, 9.3, "Two imprisoned men bond over a number of years.", ("Drama",)),
    _movie("Back to the Future", 1985, 8.5, "A teenager is accidentally sent thirty years into the past.", ("Adventure", "Comedy", "Sci-Fi")),
    _movie("Spirited Away", 2001, 8.6, "A girl wanders into a world of spirits and must free herself and her parents.", ("Animation",)),
    _movie("The Godfather", 1972, 9.2, "The aging patriarch of a crime dynasty transfers control to his son.", ("Crime", "Drama")),
]
