# src/symbol_catalog/taxonomy/categories.py
# Lowercased for matching. ORDER MATTERS: classification walks this table top
# to bottom and stops at the first keyword contained in the symbol name
# ("star" is listed under nature and shapes; nature wins).
from typing import List, Tuple

from .schema import CATCH_ALL_CID, Category, Taxonomy

TAXONOMY_VERSION = "v1"

# (cid, display name, icon, keywords)
CATEGORY_TABLE: List[Tuple[str, str, str, Tuple[str, ...]]] = [
    (CATCH_ALL_CID, "All Symbols", "square.grid.2x2", ()),

    ("communication", "Communication", "message", (
        "message", "phone", "video", "mail", "envelope",
        "bubble", "chat", "mic", "speaker", "bell",
    )),
    ("weather", "Weather", "cloud.sun", (
        "cloud", "sun", "moon", "wind", "snow",
        "rain", "bolt", "thermometer", "humidity", "tornado",
    )),
    ("objects_tools", "Objects & Tools", "wrench.and.screwdriver", (
        "wrench", "hammer", "screwdriver", "scissors", "pencil",
        "paintbrush", "ruler", "folder", "doc", "trash",
        "key", "lock", "pin", "paperclip", "link",
    )),
    ("devices", "Devices", "desktopcomputer", (
        "iphone", "ipad", "mac", "watch", "tv", "display", "keyboard",
        "mouse", "printer", "camera", "desktop", "laptop", "airpod", "homepod",
    )),
    ("connectivity", "Connectivity", "wifi", (
        "wifi", "antenna", "network", "bluetooth", "airplay", "dot.radiowaves",
    )),
    ("transportation", "Transportation", "car", (
        "car", "bus", "tram", "train", "airplane", "bicycle", "ferry", "scooter",
    )),
    ("nature", "Nature", "leaf", (
        "leaf", "tree", "flower", "flame", "drop",
        "sparkle", "star", "globe", "mountain", "water",
    )),
    ("human", "Human", "person", (
        "person", "figure", "hand", "eye", "ear",
        "nose", "mouth", "brain", "face", "body",
    )),
    ("gaming", "Gaming", "gamecontroller", (
        "gamecontroller", "arcade", "dice", "puzzle", "target",
    )),
    ("health", "Health", "heart", (
        "heart", "cross", "pill", "bandage", "stethoscope", "waveform", "activity",
    )),
    ("commerce", "Commerce", "cart", (
        "cart", "bag", "creditcard", "dollarsign", "giftcard", "barcode", "tag",
    )),
    ("text_formatting", "Text Formatting", "textformat", (
        "textformat", "bold", "italic", "underline", "strikethrough",
        "list", "paragraph", "text", "character", "abc",
    )),
    ("media", "Media", "play.rectangle", (
        "play", "pause", "stop", "forward", "backward",
        "repeat", "shuffle", "music", "film", "photo",
    )),
    ("arrows", "Arrows", "arrow.right", (
        "arrow", "chevron", "arrowtriangle",
    )),
    ("shapes", "Shapes", "square.on.circle", (
        "circle", "square", "rectangle", "triangle", "diamond", "hexagon",
        "octagon", "capsule", "seal", "shield", "star",
    )),
]

DEFAULT_TAXONOMY = Taxonomy(
    version=TAXONOMY_VERSION,
    categories=tuple(Category(cid, name, icon, kws) for cid, name, icon, kws in CATEGORY_TABLE),
)

__all__ = ["CATEGORY_TABLE", "DEFAULT_TAXONOMY", "TAXONOMY_VERSION"]
