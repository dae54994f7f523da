# src/symbol_catalog/catalog/symbols.py
# Curated subset of SF Symbols identifiers, grouped the way the asset source
# ships them. Groups overlap in a few places ("pencil.circle", "lock.fill",
# "photo.fill"); the loader keeps the first occurrence.
from typing import List, Tuple

SYMBOL_GROUPS: List[Tuple[str, Tuple[str, ...]]] = [
    ("communication", (
        "message", "message.fill", "bubble", "bubble.fill",
        "phone", "phone.fill", "phone.circle", "phone.circle.fill",
        "video", "video.fill", "video.circle", "video.circle.fill",
        "envelope", "envelope.fill", "envelope.circle", "envelope.circle.fill",
    )),
    ("weather", (
        "cloud", "cloud.fill", "cloud.rain", "cloud.rain.fill",
        "cloud.sun", "cloud.sun.fill", "cloud.moon", "cloud.moon.fill",
        "sun.min", "sun.max", "sun.max.fill", "moon", "moon.fill",
        "snowflake", "wind", "humidity",
    )),
    ("devices", (
        "desktopcomputer", "laptopcomputer",
        "keyboard", "computermouse",
    )),
    ("media", (
        "play", "play.fill", "play.circle", "play.circle.fill",
        "pause", "pause.fill", "pause.circle", "pause.circle.fill",
        "stop", "stop.fill", "stop.circle", "stop.circle.fill",
        "forward", "forward.fill", "backward", "backward.fill",
        "music.note", "music.note.list",
    )),
    ("objects_tools", (
        "pencil", "pencil.circle", "pencil.circle.fill",
        "scissors", "scissors.circle",
        "doc", "doc.fill", "doc.text", "doc.text.fill",
        "folder", "folder.fill", "folder.circle", "folder.circle.fill",
        "trash", "trash.fill", "trash.circle", "trash.circle.fill",
        "paperclip", "paperclip.circle",
        "link", "link.circle", "link.circle.fill",
        "lock", "lock.fill", "lock.circle", "lock.circle.fill",
        "lock.open", "lock.open.fill",
        "key", "key.fill",
        "pin", "pin.fill", "pin.circle", "pin.circle.fill",
        "mappin", "mappin.circle", "mappin.circle.fill",
    )),
    ("symbols", (
        "star", "star.fill", "star.circle", "star.circle.fill",
        "heart", "heart.fill", "heart.circle", "heart.circle.fill",
        "bolt", "bolt.fill", "bolt.circle", "bolt.circle.fill",
        "flag", "flag.fill", "flag.circle", "flag.circle.fill",
        "bell", "bell.fill", "bell.circle", "bell.circle.fill",
        "tag", "tag.fill", "tag.circle", "tag.circle.fill",
        "bookmark", "bookmark.fill", "bookmark.circle", "bookmark.circle.fill",
    )),
    ("arrows", (
        "arrow.up", "arrow.up.circle", "arrow.up.circle.fill",
        "arrow.down", "arrow.down.circle", "arrow.down.circle.fill",
        "arrow.left", "arrow.left.circle", "arrow.left.circle.fill",
        "arrow.right", "arrow.right.circle", "arrow.right.circle.fill",
        "arrow.clockwise", "arrow.counterclockwise",
        "chevron.up", "chevron.up.circle", "chevron.up.circle.fill",
        "chevron.down", "chevron.down.circle", "chevron.down.circle.fill",
        "chevron.left", "chevron.left.circle", "chevron.left.circle.fill",
        "chevron.right", "chevron.right.circle", "chevron.right.circle.fill",
    )),
    ("shapes", (
        "circle", "circle.fill",
        "square", "square.fill",
        "triangle", "triangle.fill",
        "diamond", "diamond.fill",
        "hexagon", "hexagon.fill",
        "capsule", "capsule.fill",
        "seal", "seal.fill",
        "shield", "shield.fill",
    )),
    ("human", (
        "person", "person.fill", "person.circle", "person.circle.fill",
        "person.2", "person.2.fill", "person.2.circle", "person.2.circle.fill",
        "person.3", "person.3.fill",
        "eye", "eye.fill", "eye.circle", "eye.circle.fill",
        "eye.slash", "eye.slash.fill",
        "hand.raised", "hand.raised.fill",
        "hand.thumbsup", "hand.thumbsup.fill",
        "hand.thumbsdown", "hand.thumbsdown.fill",
    )),
    ("editing", (
        "pencil.and.outline",
        "square.and.pencil",
        "pencil.circle",
        "slider.horizontal.3", "slider.vertical.3",
    )),
    ("commerce", (
        "cart", "cart.fill", "cart.circle", "cart.circle.fill",
        "bag", "bag.fill", "bag.circle", "bag.circle.fill",
        "creditcard", "creditcard.fill", "creditcard.circle", "creditcard.circle.fill",
        "giftcard", "giftcard.fill",
    )),
    ("health", (
        "cross.circle", "cross.circle.fill",
    )),
    ("settings", (
        "gear", "gear.circle", "gear.circle.fill",
        "gearshape", "gearshape.fill", "gearshape.circle", "gearshape.circle.fill",
    )),
    ("navigation", (
        "house", "house.fill", "house.circle", "house.circle.fill",
        "magnifyingglass", "magnifyingglass.circle", "magnifyingglass.circle.fill",
    )),
    ("status", (
        "checkmark", "checkmark.circle", "checkmark.circle.fill",
        "xmark", "xmark.circle", "xmark.circle.fill",
        "exclamationmark", "exclamationmark.circle", "exclamationmark.circle.fill",
        "exclamationmark.triangle", "exclamationmark.triangle.fill",
        "questionmark", "questionmark.circle", "questionmark.circle.fill",
        "info", "info.circle", "info.circle.fill",
        "plus", "plus.circle", "plus.circle.fill",
        "minus", "minus.circle", "minus.circle.fill",
    )),
    ("transportation", (
        "car", "car.fill", "car.circle", "car.circle.fill",
        "bus", "bus.fill",
        "tram", "tram.fill",
        "airplane", "airplane.circle", "airplane.circle.fill",
        "bicycle", "bicycle.circle",
    )),
    ("connectivity", (
        "wifi", "wifi.circle", "wifi.circle.fill",
        "antenna.radiowaves.left.and.right",
    )),
    ("text", (
        "textformat", "textformat.abc", "textformat.size",
        "bold", "italic", "underline", "strikethrough",
        "list.bullet", "list.number",
        "paragraphsign",
    )),
    ("photos", (
        "photo", "photo.fill", "photo.circle", "photo.circle.fill",
        "camera", "camera.fill", "camera.circle", "camera.circle.fill",
        "photo.on.rectangle", "photo.on.rectangle.fill",
    )),
    ("nature", (
        "leaf", "leaf.fill", "leaf.circle", "leaf.circle.fill",
        "flame", "flame.fill", "flame.circle", "flame.circle.fill",
        "drop", "drop.fill", "drop.circle", "drop.circle.fill",
        "sparkle", "sparkles",
    )),
    ("common", (
        "square.and.arrow.up", "square.and.arrow.up.fill",
        "square.and.arrow.down", "square.and.arrow.down.fill",
        "doc.on.doc", "doc.on.doc.fill",
        "calendar", "calendar.circle", "calendar.circle.fill",
        "clock", "clock.fill",
        "alarm", "alarm.fill",
        "stopwatch", "stopwatch.fill",
        "timer",
        "chart.bar", "chart.bar.fill",
        "lock.fill",
        "photo.fill",
    )),
]


def all_symbol_names() -> List[str]:
    """Flatten SYMBOL_GROUPS in declaration order, duplicates included."""
    return [name for _, names in SYMBOL_GROUPS for name in names]


__all__ = ["SYMBOL_GROUPS", "all_symbol_names"]
