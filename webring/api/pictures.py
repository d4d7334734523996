from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from webring.schemas.webring import ErrorResponse, Picture, PictureListResponse
from webring.services.pictures_service import PicturesService, get_pictures_service

router = APIRouter(prefix="/pictures", tags=["Pictures"])


# registered before /{filename} so "list" is not treated as a file name
@router.get("/list", response_model=PictureListResponse,
            responses={404: {"description": "Pictures directory not found", "model": ErrorResponse}},
            summary="Get all available pictures")
def list_pictures(pictures: PicturesService = Depends(get_pictures_service)) -> PictureListResponse:
    items = [Picture(**p) for p in pictures.list_pictures()]
    return PictureListResponse(pictures=items, count=len(items))


@router.get("/{filename}", response_class=FileResponse,
            responses={404: {"description": "Picture not found", "model": ErrorResponse}},
            summary="Get a specific picture")
def get_picture(filename: str, pictures: PicturesService = Depends(get_pictures_service)) -> FileResponse:
    return FileResponse(pictures.resolve(filename))
