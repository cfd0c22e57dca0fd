"""Write acknowledgement schemas."""

from pydantic import BaseModel


class InsertResult(BaseModel):
    """Acknowledgement of an inserted record."""

    acknowledged: bool = True
    inserted_id: int


class UpdateResult(BaseModel):
    """Acknowledgement of an update."""

    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResult(BaseModel):
    """Acknowledgement of a delete."""

    acknowledged: bool = True
    deleted_count: int
