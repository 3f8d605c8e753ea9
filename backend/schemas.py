# backend/schemas.py
"""Field contract for movie submissions.

``validate_movie`` checks a full submission, ``validate_movie_partial`` a
PATCH body where every field is optional. Neither raises: both return a
``ValidationResult`` carrying either the normalized data or every
violation found.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any, Dict, List, Literal, Optional, get_args

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, ValidationError

MIN_YEAR = 1900
DEFAULT_RATING = 5
# largest value an SQLite INTEGER column holds
SQLITE_INT_MAX = 2**63 - 1


def _not_after_current_year(value: int) -> int:
    # upper bound moves with the host clock
    current = date.today().year
    if value > current:
        raise ValueError(f"year must be less than or equal to {current}")
    return value


def _require_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("rating must be a number")
    return value


Title = Annotated[str, Field(strict=True)]
Director = Annotated[str, Field(strict=True)]
Year = Annotated[int, Field(strict=True, ge=MIN_YEAR), AfterValidator(_not_after_current_year)]
Duration = Annotated[int, Field(strict=True, gt=0, le=SQLITE_INT_MAX)]
Genre = Literal["action", "adventure", "sci-fi", "fantasy", "drama", "crime"]
GENRES = get_args(Genre)
Rating = Annotated[float, BeforeValidator(_require_number), Field(ge=0, le=10)]


class MovieIn(BaseModel):
    """A full movie submission (POST body)."""

    title: Title
    year: Year
    director: Director
    duration: Duration
    genre: List[Genre]
    rating: Rating = DEFAULT_RATING


class MoviePatch(BaseModel):
    """A partial submission. Absent fields are skipped, explicit nulls are not."""

    title: Title = None
    year: Year = None
    director: Director = None
    duration: Duration = None
    genre: List[Genre] = None
    rating: Rating = None


class MovieRecord(MovieIn):
    """A stored movie as it appears on the wire."""

    id: Annotated[str, Field(strict=True, min_length=1)]


@dataclass
class ValidationResult:
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


def format_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``{"path", "code", "message"}`` items."""
    return [
        {"path": list(err["loc"]), "code": err["type"], "message": err["msg"]}
        for err in exc.errors()
    ]


def _validate(model, candidate, **dump_kwargs) -> ValidationResult:
    try:
        parsed = model.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(errors=format_errors(exc))
    return ValidationResult(data=parsed.model_dump(**dump_kwargs))


def validate_movie(candidate) -> ValidationResult:
    return _validate(MovieIn, candidate)


def validate_movie_partial(candidate) -> ValidationResult:
    return _validate(MoviePatch, candidate, exclude_unset=True)
