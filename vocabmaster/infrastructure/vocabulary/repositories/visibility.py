"""SQL filters shared by the vocabulary repositories."""

from sqlalchemy import ColumnElement, or_, select

from vocabmaster.domain.common.value_objects.ids import UserId
from vocabmaster.models import UserWordSet as UserWordSetORM
from vocabmaster.models import WordSet as WordSetORM


def in_collection(user_id: UserId) -> ColumnElement[bool]:
    """Word set has been imported by the user."""
    return (
        select(UserWordSetORM.id)
        .where(
            UserWordSetORM.word_set_id == WordSetORM.id,
            UserWordSetORM.user_id == user_id.value,
        )
        .exists()
    )


def visible_to(user_id: UserId) -> ColumnElement[bool]:
    """Word set is public, owned by the user, or in the user's collection."""
    return or_(
        WordSetORM.is_public.is_(True),
        WordSetORM.owner_id == user_id.value,
        in_collection(user_id),
    )
