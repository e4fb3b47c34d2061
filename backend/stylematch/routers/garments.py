from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from stylematch.database import get_db
from stylematch.schemas import ViewResponse
from stylematch.stores import SqlViewRecorder

router = APIRouter(prefix="/garments", tags=["garments"])


def get_view_recorder(db: Session = Depends(get_db)) -> SqlViewRecorder:
    return SqlViewRecorder(db)


@router.post("/{garment_id}/view", response_model=ViewResponse)
def record_garment_view(
    garment_id: str,
    viewer_id: str = Query(..., alias="viewerId", min_length=1, max_length=64),
    recorder: SqlViewRecorder = Depends(get_view_recorder),
):
    """
    Record that a viewer opened a garment. Clients fire this after showing
    suggestions; repeating it for the same viewer does not add a view.
    """
    count = recorder.record_view(garment_id, viewer_id)
    return ViewResponse(message="View recorded", view_count=count)
