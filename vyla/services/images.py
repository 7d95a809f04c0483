"""
Construction des URLs d'images TMDB.

Un chemin relatif TMDB ("/abc.jpg") et une taille donnent soit l'URL
directe du CDN, soit le chemin du proxy interne ({prefix}/image/{size}/{file}).
Le mode est choisi une fois par deploiement ; une seule instance est
partagee par tous les shapers.
"""

from typing import Any, Literal, Optional

from vyla.utils.constants import DEFAULT_IMAGE_SIZES, IMAGE_SIZES

ImageMode = Literal["proxy", "direct"]


class ImageUrlBuilder:
    """
    Fabrique d'URLs d'images.

    Attributes:
        mode: "direct" (CDN TMDB) ou "proxy" (meme origine)
        cdn_base_url: Base du CDN TMDB (https://image.tmdb.org/t/p)
        proxy_prefix: Prefixe de l'API pour le mode proxy (ex: "/api")

    Example:
        builder = ImageUrlBuilder(mode="direct")
        builder.build_url("/abc.jpg", "w500")
        # "https://image.tmdb.org/t/p/w500/abc.jpg"
    """

    def __init__(
        self,
        mode: ImageMode = "proxy",
        cdn_base_url: str = "https://image.tmdb.org/t/p",
        proxy_prefix: str = "",
    ) -> None:
        if mode not in ("proxy", "direct"):
            raise ValueError(f"Mode d'image inconnu: {mode}")
        self.mode = mode
        self.cdn_base_url = cdn_base_url.rstrip("/")
        self.proxy_prefix = proxy_prefix.rstrip("/")

    @staticmethod
    def resolve_size(size: Optional[str], image_class: str = "poster") -> str:
        """
        Valide une taille pour une classe d'image.

        Une taille inconnue retombe sur la taille par defaut de la classe,
        une classe inconnue est traitee comme "poster".
        """
        if image_class not in IMAGE_SIZES:
            image_class = "poster"
        if size in IMAGE_SIZES[image_class]:
            return size
        return DEFAULT_IMAGE_SIZES[image_class]

    def build_url(
        self,
        path: Any,
        size: Optional[str] = None,
        image_class: str = "poster",
    ) -> Optional[str]:
        """
        Compose l'URL d'une image.

        Args:
            path: Chemin TMDB (ex: "/abc.jpg"), None ou vide si pas d'image
            size: Taille demandee (ex: "w500")
            image_class: poster, backdrop, profile, logo ou still

        Returns:
            URL complete ou chemin proxy, None si pas d'image
        """
        if not path or not isinstance(path, str):
            return None

        clean_path = path[1:] if path.startswith("/") else path
        if not clean_path:
            return None

        valid_size = self.resolve_size(size, image_class)
        if self.mode == "direct":
            return f"{self.cdn_base_url}/{valid_size}/{clean_path}"
        return f"{self.proxy_prefix}/image/{valid_size}/{clean_path}"

    def responsive_set(self, path: Any, image_class: str = "poster") -> list[dict[str, Any]]:
        """
        Liste les variantes dimensionnees d'une image (srcset).

        "w342" donne une largeur, "h632" une hauteur ; "original" est exclu
        car ses dimensions ne sont pas connues.
        """
        if not self.build_url(path, image_class=image_class):
            return []
        sizes = IMAGE_SIZES.get(image_class, IMAGE_SIZES["poster"])
        variants = []
        for size in sizes:
            dimension = {"w": "width", "h": "height"}.get(size[:1])
            if dimension is None or not size[1:].isdigit():
                continue
            variants.append({
                "size": size,
                "url": self.build_url(path, size, image_class),
                dimension: int(size[1:]),
            })
        return variants
