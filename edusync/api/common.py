from typing import Optional, TypeVar

from fastapi import HTTPException, Response, status

T = TypeVar("T")


def get_or_404(record: Optional[T], label: str) -> T:
    if record is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return record


def deleted_or_404(deleted: bool, label: str) -> Response:
    if not deleted:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
