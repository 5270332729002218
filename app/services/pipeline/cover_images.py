import random
from typing import Optional

INTERVIEW_COVERS = (
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
)


def get_random_interview_cover(rng: Optional[random.Random] = None) -> str:
    """Pick a cover image path for a new interview card."""
    return (rng or random).choice(INTERVIEW_COVERS)
