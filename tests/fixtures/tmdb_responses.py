"""
Mock TMDB API responses for testing.

Realistic (trimmed) responses from the TMDB v3 API used by the upstream
client tests (with respx) and by the route tests (as AsyncMock return values).
"""

# GET /movie/603
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
    "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
    "homepage": "http://www.warnerbros.com/matrix",
    "id": 603,
    "imdb_id": "tt0133093",
    "original_language": "en",
    "original_title": "The Matrix",
    "overview": "Set in the 22nd century, The Matrix tells the story of a computer hacker...",
    "popularity": 84.63,
    "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
    "production_companies": [
        {
            "id": 79,
            "logo_path": "/at4uYdwAAgNRKhZuuFX8ShKSybw.png",
            "name": "Village Roadshow Pictures",
            "origin_country": "US",
        },
        {"id": 372, "logo_path": None, "name": "Groucho II Film Partnership", "origin_country": ""},
    ],
    "release_date": "1999-03-31",
    "runtime": 136,
    "status": "Released",
    "tagline": "Welcome to the Real World.",
    "title": "The Matrix",
    "video": False,
    "vote_average": 8.216,
    "vote_count": 25000,
}

# GET /movie/603/credits
TMDB_MOVIE_CREDITS_RESPONSE = {
    "id": 603,
    "cast": [
        {
            "id": 2975,
            "name": "Laurence Fishburne",
            "character": "Morpheus",
            "order": 1,
            "profile_path": "/iwx7h0AfUbS9JVLhvB5TmfYBTmr.jpg",
        },
        {
            "id": 6384,
            "name": "Keanu Reeves",
            "character": "Thomas A. Anderson / Neo",
            "order": 0,
            "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
        },
        {
            "id": 530,
            "name": "Carrie-Anne Moss",
            "character": "",
            "order": 2,
            "profile_path": None,
        },
    ],
    "crew": [
        {"id": 9339, "name": "Lilly Wachowski", "job": "Director", "profile_path": None},
        {"id": 9340, "name": "Lana Wachowski", "job": "Director", "profile_path": None},
        {"id": 9339, "name": "Lilly Wachowski", "job": "Writer", "profile_path": None},
        {"id": 1091, "name": "Joel Silver", "job": "Producer", "profile_path": None},
    ],
}

# GET /movie/603/recommendations
TMDB_MOVIE_RECOMMENDATIONS_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 604,
            "title": "The Matrix Reloaded",
            "media_type": "movie",
            "poster_path": "/9TGHDvWrqKBzwDxDodHYXEmOE6J.jpg",
            "backdrop_path": "/pdVHUsb2eEz9ALNTr6wfRJe5xVa.jpg",
            "release_date": "2003-05-15",
            "vote_average": 7.0,
            "popularity": 40.2,
            "genre_ids": [28, 878],
        },
        {
            "id": 605,
            "title": "The Matrix Revolutions",
            "media_type": "movie",
            "poster_path": "/fgm8OZ7o4G1G1I9EeGcb85Noe6L.jpg",
            "backdrop_path": None,
            "release_date": "2003-11-05",
            "vote_average": 6.7,
            "popularity": 35.9,
            "genre_ids": [28, 878],
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /movie/603/videos
TMDB_MOVIE_VIDEOS_RESPONSE = {
    "id": 603,
    "results": [
        {"key": "abc123", "site": "Vimeo", "type": "Trailer"},
        {"key": "m8e-FF8MsqU", "site": "YouTube", "type": "Teaser"},
        {"key": "vKQi3bBA1y8", "site": "YouTube", "type": "Trailer"},
    ],
}

# GET /tv/1399
TMDB_TV_DETAILS_RESPONSE = {
    "id": 1399,
    "name": "Game of Thrones",
    "original_name": "Game of Thrones",
    "overview": "Seven noble families fight for control of the mythical land of Westeros.",
    "backdrop_path": "/2OMB0ynKlyIenMJWI2Dy9IWT4c.jpg",
    "poster_path": "/1XS1oqL89opfnbLl8WnZY1O1uJx.jpg",
    "first_air_date": "2011-04-17",
    "episode_run_time": [60],
    "genres": [{"id": 10765, "name": "Sci-Fi & Fantasy"}],
    "number_of_seasons": 8,
    "number_of_episodes": 73,
    "vote_average": 8.4,
    "vote_count": 21000,
    "popularity": 369.6,
    "status": "Ended",
    "created_by": [
        {"id": 9813, "name": "David Benioff", "profile_path": "/xvNN5huL0X8yJ7h3IZfGG4O2zBD.jpg"},
    ],
    "seasons": [
        {
            "id": 3624,
            "season_number": 2,
            "name": "Season 2",
            "episode_count": 10,
            "air_date": "2012-04-01",
            "poster_path": None,
            "overview": "",
        },
        {
            "id": 3627,
            "season_number": 0,
            "name": "Specials",
            "episode_count": 14,
            "air_date": "2010-12-05",
            "poster_path": "/kMTcwNRfFKCZ0O2OaBZS0nZ2AIe.jpg",
            "overview": "",
        },
        {
            "id": 3625,
            "season_number": 1,
            "name": "Season 1",
            "episode_count": 10,
            "air_date": "2011-04-17",
            "poster_path": "/wgfKiqzuMrFIkU1M68DDDY8kGC1.jpg",
            "overview": "Trouble is brewing in the Seven Kingdoms of Westeros.",
        },
    ],
}

# GET /tv/1399/season/1
TMDB_SEASON_RESPONSE = {
    "id": 3625,
    "season_number": 1,
    "name": "Season 1",
    "overview": "Trouble is brewing in the Seven Kingdoms of Westeros.",
    "air_date": "2011-04-17",
    "poster_path": "/wgfKiqzuMrFIkU1M68DDDY8kGC1.jpg",
    "episodes": [
        {
            "id": 63056,
            "episode_number": 1,
            "season_number": 1,
            "name": "Winter Is Coming",
            "overview": "Jon Arryn, the Hand of the King, is dead.",
            "air_date": "2011-04-17",
            "runtime": 62,
            "still_path": "/9hGF3WUkBf7cSjMg0cdMDHJkByd.jpg",
            "vote_average": 7.9,
            "vote_count": 300,
        },
        {
            "id": 63057,
            "episode_number": 2,
            "season_number": 1,
            "name": "The Kingsroad",
            "overview": "",
            "air_date": "2011-04-24",
            "runtime": 56,
            "still_path": None,
            "vote_average": 0,
            "vote_count": 0,
        },
    ],
}

# GET /tv/1399/season/1/episode/1
TMDB_EPISODE_RESPONSE = {
    "id": 63056,
    "episode_number": 1,
    "season_number": 1,
    "name": "Winter Is Coming",
    "overview": "Jon Arryn, the Hand of the King, is dead.",
    "air_date": "2011-04-17",
    "runtime": 62,
    "still_path": "/9hGF3WUkBf7cSjMg0cdMDHJkByd.jpg",
    "vote_average": 7.9,
    "vote_count": 300,
    "production_code": "101",
    "crew": [
        {"id": 44797, "name": "Tim Van Patten", "job": "Director", "profile_path": None},
        {"id": 9813, "name": "David Benioff", "job": "Writer", "profile_path": None},
    ],
    "guest_stars": [
        {"id": 100 + n, "name": f"Guest {n}", "character": f"Role {n}", "order": n, "profile_path": None}
        for n in range(12)
    ],
}

# GET /person/6384
TMDB_PERSON_RESPONSE = {
    "id": 6384,
    "name": "Keanu Reeves",
    "biography": "Keanu Charles Reeves is a Canadian actor.",
    "birthday": "1964-09-02",
    "deathday": None,
    "place_of_birth": "Beirut, Lebanon",
    "known_for_department": "Acting",
    "popularity": 55.1,
    "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
}

# GET /person/6384/combined_credits
TMDB_PERSON_CREDITS_RESPONSE = {
    "id": 6384,
    "cast": [
        {
            "id": 603,
            "media_type": "movie",
            "title": "The Matrix",
            "character": "Neo",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-31",
            "popularity": 84.6,
            "vote_average": 8.2,
        },
        {
            "id": 245891,
            "media_type": "movie",
            "title": "John Wick",
            "character": "John Wick",
            "poster_path": "/fZPSd91yGE9fCcCe6OoQr6E3Bev.jpg",
            "release_date": "2014-10-22",
            "popularity": 120.4,
            "vote_average": 7.4,
        },
        {
            "id": 603,
            "media_type": "movie",
            "title": "The Matrix",
            "character": "Thomas Anderson",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-31",
            "popularity": 84.6,
            "vote_average": 8.2,
        },
        {
            "id": 1416,
            "media_type": "tv",
            "name": "Swedish Dicks",
            "character": "Tex",
            "poster_path": None,
            "first_air_date": "2016-08-01",
            "popularity": 3.1,
            "vote_average": 5.9,
        },
    ],
}

# GET /search/multi?query=matrix
TMDB_SEARCH_MULTI_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 603,
            "media_type": "movie",
            "title": "The Matrix",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
            "release_date": "1999-03-31",
            "vote_average": 8.2,
            "popularity": 84.6,
        },
        {
            "id": 6384,
            "media_type": "person",
            "name": "Keanu Reeves",
            "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
        },
        {
            "id": 62452,
            "media_type": "tv",
            "name": "The Matrix Resurrections Behind the Scenes",
            "poster_path": None,
            "first_air_date": "2021-12-22",
        },
        {
            "id": 1421,
            "media_type": "tv",
            "name": "Matrix",
            "poster_path": "/abcMatrixTv.jpg",
            "first_air_date": "1993-03-01",
            "vote_average": 0,
            "popularity": 4.2,
        },
    ],
    "total_pages": 3,
    "total_results": 52,
}

# GET /genre/movie/list
TMDB_GENRES_RESPONSE = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Adventure"},
        {"id": 16, "name": "Animation"},
    ],
}

# GET /discover/movie?with_genres=28 (also used for the home sections)
TMDB_DISCOVER_RESPONSE = {
    "page": 2,
    "results": [
        {
            "id": 550,
            "title": "Fight Club",
            "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
            "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
            "release_date": "1999-10-15",
            "vote_average": 8.4,
            "popularity": 61.4,
            "adult": False,
            "genre_ids": [18],
        },
        {
            "id": 680,
            "title": "Pulp Fiction",
            "poster_path": "/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
            "backdrop_path": None,
            "release_date": "1994-09-10",
            "vote_average": 8.5,
            "popularity": 75.0,
            "adult": False,
            "genre_ids": [53, 80],
        },
        {
            "id": 999,
            "title": "No Artwork",
            "poster_path": None,
            "backdrop_path": None,
            "release_date": "2001-01-01",
            "popularity": 99.0,
        },
    ],
    "total_pages": 2,
    "total_results": 40,
}

# GET /trending/all/day
TMDB_TRENDING_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 1399,
            "media_type": "tv",
            "name": "Game of Thrones",
            "poster_path": "/1XS1oqL89opfnbLl8WnZY1O1uJx.jpg",
            "backdrop_path": "/2OMB0ynKlyIenMJWI2Dy9IWT4c.jpg",
            "first_air_date": "2011-04-17",
            "popularity": 369.6,
        },
        {
            "id": 603,
            "media_type": "movie",
            "title": "The Matrix",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
            "release_date": "1999-03-31",
            "popularity": 84.6,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# TMDB error body (401, 404)
TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
