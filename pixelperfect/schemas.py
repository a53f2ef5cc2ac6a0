"""
Input schemas

Request bodies are validated against these models before anything reaches
the database. Field names are accepted in camelCase (``imageUrl``) or
snake_case and failures are reported per field.
"""

from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from pixelperfect.errors import ValidationError
from pixelperfect.models.base import MAX_ID

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    # Validate only; the submitted string is stored untouched
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError('Must be a valid URL') from None
    return value


Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Url = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_check_url)]


class Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class Credentials(Schema):
    # isAdmin and any other extra key is dropped here
    username: Text
    password: str = Field(min_length=1)


class ProjectIn(Schema):
    title: Text
    description: Text
    category: Text
    client: Text
    image_url: Url
    featured: bool = False


class ServiceIn(Schema):
    title: Text
    description: Text
    icon: Text
    features: List[str]


class ProductIn(Schema):
    name: Text
    description: Text
    category: Text
    price: Text
    features: List[str]
    image_url: Url
    logo: Optional[Url] = None
    screenshots: List[Url] = []
    demo_url: Optional[Url] = None
    featured: bool = False
    is_popular: bool = False


class JobOpeningIn(Schema):
    title: Text
    location: Text
    type: Text
    salary: Text
    description: Text
    active: bool = True


class JobApplicationIn(Schema):
    job_id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    first_name: Text
    last_name: Text
    email: EmailStr
    position: Text
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None


class BlogArticleIn(Schema):
    title: Text
    content: Text
    excerpt: Text
    category: Text
    image_url: Url
    author_name: Text
    author_image_url: Url
    published: bool = False


def field_errors(exc):
    """Collapse a pydantic error list into ``{field: [messages]}``."""
    errors = {}
    for error in exc.errors():
        field = str(error['loc'][0]) if error['loc'] else 'body'
        errors.setdefault(field, []).append(error['msg'])
    return errors


def validate(schema, payload, label='request'):
    """Validate a full record and return the model instance."""
    if payload is None:
        payload = {}
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc), f'Invalid {label} data') from None


def validate_partial(schema, current, payload, label='request'):
    """Validate ``payload`` merged over ``current`` and return only the changes.

    The merged record must satisfy the full schema, so a partial update
    can never null out a required field. Keys absent from ``payload`` are
    not part of the result.
    """
    if not isinstance(payload, dict):
        raise ValidationError({'body': ['Expected a JSON object']}, f'Invalid {label} data')
    payload = {to_camel(key) if '_' in key else key: value for key, value in payload.items()}
    merged = validate(schema, {**current, **payload}, label)
    changes = {}
    for name, info in schema.model_fields.items():
        if name in payload or info.alias in payload:
            changes[name] = getattr(merged, name)
    return changes
