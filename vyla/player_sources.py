"""
Catalogue des sources de lecture embarquees.

Liste statique chargee une fois au demarrage, dans l'ordre de configuration.
Chaque modele d'URL est verifie au chargement par PlayerUrlFormatter : une
faute de frappe dans un placeholder empeche le demarrage au lieu de produire
une URL cassee.
"""

from vyla.core.value_objects import PlayerSource

_PLAYER_SOURCES_CONFIG = (
    {
        "id": "pstream",
        "name": "P-Stream",
        "needs_sandbox": True,
        "movie": "https://iframe.pstream.mov/media/tmdb-movie-{id}",
        "tv": "https://iframe.pstream.mov/media/tmdb-tv-{id}/{season}/{episode}",
        "start_time_param": "t",
        "time_format": "hms",
        "supports_events": True,
        "event_origin": "https://iframe.pstream.mov",
    },
    {
        "id": "multiembed",
        "name": "MultiEmbed",
        "movie": "https://multiembed.mov/?video_id={id}&tmdb=1",
        "tv": "https://multiembed.mov/?video_id={id}&tmdb=1&s={season}&e={episode}",
    },
    {
        "id": "moviesapi",
        "name": "MoviesAPI",
        "movie": "https://moviesapi.club/movie/{id}",
        "tv": "https://moviesapi.club/tv/{id}-{season}-{episode}",
    },
    {
        "id": "hexa",
        "name": "Hexa",
        "needs_sandbox": True,
        "movie": "https://hexa.watch/watch/movie/{id}",
        "tv": "https://hexa.watch/watch/tv/{id}/{season}/{episode}",
    },
    {
        "id": "vidlink",
        "name": "VidLink",
        "movie": "https://vidlink.pro/movie/{id}",
        "tv": "https://vidlink.pro/tv/{id}/{season}/{episode}",
        "start_time_param": "startAt",
        "time_format": "seconds",
        "supports_events": True,
        "event_origin": "https://vidlink.pro",
    },
    {
        "id": "vidsrcXyz",
        "name": "VidSrcXyz",
        "movie": "https://vidsrc.xyz/embed/movie/{id}",
        "tv": "https://vidsrc.xyz/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "vidsrcvip",
        "name": "VidSrcVIP",
        "movie": "https://vidsrc.vip/embed/movie/{id}",
        "tv": "https://vidsrc.vip/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "2embed",
        "name": "2Embed",
        "movie": "https://www.2embed.cc/embed/{id}",
        "tv": "https://www.2embed.cc/embedtv/{id}&s={season}&e={episode}",
    },
    {
        "id": "123embed",
        "name": "123Embed",
        "needs_sandbox": True,
        "movie": "https://play2.123embed.net/movie/{id}",
        "tv": "https://play2.123embed.net/tv/{id}/{season}/{episode}",
    },
    {
        "id": "111movies",
        "name": "111Movies",
        "movie": "https://111movies.com/movie/{id}",
        "tv": "https://111movies.com/tv/{id}/{season}/{episode}",
    },
    {
        "id": "smashystream",
        "name": "SmashyStream",
        "movie": "https://player.smashy.stream/movie/{id}",
        "tv": "https://player.smashy.stream/tv/{id}?s={season}&e={episode}",
        "start_time_param": "startTime",
        "time_format": "seconds",
    },
    {
        "id": "autoembed",
        "name": "AutoEmbed",
        "needs_sandbox": True,
        "movie": "https://player.autoembed.cc/embed/movie/{id}",
        "tv": "https://player.autoembed.cc/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "videasy",
        "name": "VidEasy (4K)",
        "movie": "https://player.videasy.net/movie/{id}?color=8834ec",
        "tv": "https://player.videasy.net/tv/{id}/{season}/{episode}?color=8834ec",
        "supports_events": True,
        "event_origin": "https://player.videasy.net",
    },
    {
        "id": "vidfast",
        "name": "VidFast (4K)",
        "movie": "https://vidfast.pro/movie/{id}",
        "tv": "https://vidfast.pro/tv/{id}/{season}/{episode}",
        "start_time_param": "startAt",
        "time_format": "seconds",
    },
    {
        "id": "vidify",
        "name": "Vidify",
        "needs_sandbox": True,
        "movie": "https://vidify.top/embed/movie/{id}",
        "tv": "https://vidify.top/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "rive",
        "name": "RiveStream",
        "needs_sandbox": True,
        "movie": "https://rivestream.org/embed?type=movie&id={id}",
        "tv": "https://rivestream.org/embed?type=tv&id={id}&season={season}&episode={episode}",
    },
    {
        "id": "vidora",
        "name": "Vidora",
        "movie": "https://vidora.su/movie/{id}",
        "tv": "https://vidora.su/tv/{id}/{season}/{episode}",
    },
    {
        "id": "vidsrccc",
        "name": "VidSrcCC",
        "needs_sandbox": True,
        "movie": "https://vidsrc.cc/v2/embed/movie/{id}?autoPlay=false",
        "tv": "https://vidsrc.cc/v2/embed/tv/{id}/{season}/{episode}?autoPlay=false",
        "supports_events": True,
        "event_origin": "https://vidsrc.cc",
    },
    {
        "id": "vidsrcto",
        "name": "VidSrcTO",
        "movie": "https://vidsrc.to/embed/movie/{id}",
        "tv": "https://vidsrc.to/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "streamflix",
        "name": "StreamFlix",
        "movie": "https://watch.streamflix.one/movie/{id}/watch?server=1",
        "tv": "https://watch.streamflix.one/tv/{id}/watch?server=1&season={season}&episode={episode}",
    },
    {
        "id": "vidzee",
        "name": "VidZee",
        "movie": "https://player.vidzee.wtf/embed/movie/{id}",
        "tv": "https://player.vidzee.wtf/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "spenflix",
        "name": "Spenflix",
        "needs_sandbox": True,
        "movie": "https://spencerdevs.xyz/movie/{id}",
        "tv": "https://spencerdevs.xyz/tv/{id}/{season}/{episode}",
    },
    {
        "id": "primewire",
        "name": "PrimeWire",
        "movie": "https://www.primewire.tf/embed/movie?tmdb={id}",
        "tv": "https://www.primewire.tf/embed/tv?tmdb={id}&season={season}&episode={episode}",
    },
    {
        "id": "player4u",
        "name": "Player 4U",
        "movie": "https://vidapi.xyz/embed/movie/{id}",
        "tv": "https://vidapi.xyz/embed/tv/{id}&s={season}&e={episode}",
    },
    {
        "id": "bludflix",
        "name": "BludFlix",
        "needs_sandbox": True,
        "movie": "https://watch.bludclart.com/movie/{id}/watch",
        "tv": "https://watch.bludclart.com/tv/{id}/watch?season={season}&episode={episode}",
    },
    {
        "id": "flixersu",
        "name": "Flixer SU",
        "needs_sandbox": True,
        "movie": "https://flixer.su/watch/movie/{id}",
        "tv": "https://flixer.su/watch/tv/{id}/{season}/{episode}",
    },
    {
        "id": "mocine",
        "name": "Mocine",
        "needs_sandbox": True,
        "movie": "https://mocine.cam/watching-movie?movieId={id}",
        "tv": "https://mocine.cam/watching-series?id={id}&season={season}&episode={episode}",
    },
    {
        "id": "asguard",
        "name": "Asguard",
        "needs_sandbox": True,
        "movie": "https://asgardstream-api.pages.dev/movie/{id}",
        "tv": "https://asgardstream-api.pages.dev/tv/{id}/{season}/{episode}",
    },
    {
        "id": "turbovid",
        "name": "TurboVid",
        "needs_sandbox": True,
        "movie": "https://turbovid.eu/api/req/movie/{id}",
        "tv": "https://turbovid.eu/api/req/tv/{id}/{season}/{episode}",
    },
    {
        "id": "nontongo",
        "name": "NonTongo",
        "movie": "https://www.nontongo.win/embed/movie/{id}",
        "tv": "https://www.nontongo.win/embed/tv/{id}/{season}/{episode}",
    },
    {
        "id": "french",
        "name": "French",
        "is_french": True,
        "movie": "https://frembed.lol/api/film.php?id={id}",
        "tv": "https://frembed.lol/api/serie.php?id={id}&sa={season}&epi={episode}",
    },
)


def _to_source(entry: dict) -> PlayerSource:
    """Convertit une entree de configuration en PlayerSource."""
    return PlayerSource(
        id=entry["id"],
        name=entry["name"],
        movie_template=entry["movie"],
        tv_template=entry["tv"],
        is_french=entry.get("is_french", False),
        needs_sandbox=entry.get("needs_sandbox", False),
        supports_events=entry.get("supports_events", False),
        event_origin=entry.get("event_origin"),
        start_time_param=entry.get("start_time_param"),
        time_format=entry.get("time_format"),
    )


def load_sources(config: tuple[dict, ...] = _PLAYER_SOURCES_CONFIG) -> tuple[PlayerSource, ...]:
    """Charge le catalogue dans l'ordre de configuration."""
    return tuple(_to_source(entry) for entry in config)
