"""Testing API endpoint.

DELETE /testing/all-data - Remove every video (test fixtures)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from videohub.api.app import get_store
from videohub.store.memory import VideoStore

router = APIRouter(prefix="/testing", tags=["testing"])


@router.delete(
    "/all-data",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_all_data(store: VideoStore = Depends(get_store)) -> Response:
    """Clear the store.

    Always 204, whether or not there was anything to delete.
    """
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
