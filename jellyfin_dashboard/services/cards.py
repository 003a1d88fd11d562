"""Map Jellyfin items onto dashboard cards. Pure functions, no I/O."""

from jellyfin_dashboard.models import Card, JellyfinItem


def poster_id(item: JellyfinItem) -> str:
    """Episodes rarely carry their own poster; borrow the series artwork."""
    if item.type == "Episode" and item.series_id:
        return item.series_id
    return item.id


def premiere_year(item: JellyfinItem) -> str:
    if len(item.premiere_date) >= 4:
        return item.premiere_date[:4]
    return ""


def to_card(item: JellyfinItem, base_url: str, image_size: str = "") -> Card:
    return Card(
        title=item.name,
        subtitle=item.type,
        image=f"{base_url}/Items/{poster_id(item)}/Images/Primary{image_size}",
        href=f"{base_url}/web/index.html#!/details?id={item.id}",
        rating=item.community_rating,
        year=premiere_year(item),
        content_rating=item.official_rating,
    )


def to_cards(items: list[JellyfinItem], base_url: str, image_size: str = "") -> list[Card]:
    """Transform a whole response, keeping upstream order."""
    return [to_card(item, base_url, image_size) for item in items]
