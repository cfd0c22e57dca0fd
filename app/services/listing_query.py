"""Translation of listing search parameters into a store query."""

import enum
import typing as t
from dataclasses import dataclass

from sqlalchemy import ColumnElement, Select, UnaryExpression, select

from app.core.models import FoodListing, ListingStatus

LIKE_ESCAPE: str = "\\"


class SortDirection(str, enum.Enum):
    """Ordering of listings by expiration date."""

    ASC = "asc"
    DSC = "dsc"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally.

    Args:
        value (str): Raw search text.

    Returns:
        str: The text with ``\\``, ``%`` and ``_`` escaped.
    """
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


@dataclass(frozen=True)
class ListingQuery:
    """Filter and ordering for a listing search."""

    status: ListingStatus | None = None
    search: str | None = None
    sort: SortDirection | None = None

    def conditions(self) -> t.List[ColumnElement[bool]]:
        """Build the WHERE conditions, combined with AND by the caller.

        Returns:
            t.List[ColumnElement[bool]]: The filter conditions.
        """
        conditions: t.List[ColumnElement[bool]] = []
        if self.status is not None:
            conditions.append(FoodListing.status == self.status)
        if self.search is not None:
            conditions.append(
                FoodListing.food_name.ilike(
                    f"%{escape_like(self.search)}%", escape=LIKE_ESCAPE
                )
            )
        return conditions

    def order_by(self) -> UnaryExpression[t.Any] | None:
        """Build the ORDER BY clause.

        Returns:
            UnaryExpression[t.Any] | None: None leaves store order untouched.
        """
        match self.sort:
            case SortDirection.ASC:
                return FoodListing.expire_date.asc()
            case SortDirection.DSC:
                return FoodListing.expire_date.desc()
            case _:
                return None

    def statement(self) -> Select[t.Tuple[FoodListing]]:
        """Render the query as a SELECT statement.

        Returns:
            Select[t.Tuple[FoodListing]]: The statement to execute.
        """
        query: Select[t.Tuple[FoodListing]] = select(FoodListing).where(
            *self.conditions()
        )
        order_clause: UnaryExpression[t.Any] | None = self.order_by()
        if order_clause is not None:
            query = query.order_by(order_clause)
        return query


def build_listing_query(
    available: str | None = None,
    search: str | None = None,
    sort: str | None = None,
) -> ListingQuery:
    """Build a listing query from request parameters.

    Args:
        available (str | None):
            Restrict to Available listings when non-empty, whatever the
            value (``?available=false`` still filters).
        search (str | None):
            Case-insensitive substring of the food name.
        sort (str | None):
            ``asc`` or ``dsc`` on expiration date; anything else is ignored.

    Returns:
        ListingQuery: The translated query.
    """
    direction: SortDirection | None
    try:
        direction = SortDirection(sort) if sort is not None else None
    except ValueError:
        direction = None

    return ListingQuery(
        status=ListingStatus.AVAILABLE if available else None,
        search=search or None,
        sort=direction,
    )
