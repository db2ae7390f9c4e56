from animelog.domain.shared import ErrorCode, ValidationError


def ensure_anime_id(anime_id: int) -> None:
    if anime_id <= 0:
        msg = f"Invalid anime id: {anime_id}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_ANIME_ID,
            details={"anime_id": anime_id},
        )
