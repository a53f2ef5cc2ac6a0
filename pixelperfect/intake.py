"""
Job Application Intake

Public submissions with an optional résumé. The attachment is checked
before anything is written and, once accepted, is stored inline on the
application as a base64 data URI.
"""

import base64
import logging

from pixelperfect.errors import ValidationError
from pixelperfect.schemas import JobApplicationIn, validate

logger = logging.getLogger(__name__)

FORM_FIELDS = ('jobId', 'firstName', 'lastName', 'email', 'position', 'coverLetter')


def read_resume(upload, max_bytes, allowed_types):
    """Return the upload as a data URI, or None when no file was sent.

    Raises ValidationError keyed on ``resume`` for an oversized file or a
    declared type outside ``allowed_types``.
    """
    if upload is None or not upload.filename:
        return None

    problems = []
    mimetype = upload.mimetype
    if mimetype not in allowed_types:
        problems.append(f'Unsupported file type {mimetype or "unknown"}; allowed: PDF, DOC, DOCX, TXT')

    payload = upload.read(max_bytes + 1)
    if len(payload) > max_bytes:
        problems.append(f'File exceeds the {max_bytes // (1024 * 1024)} MB limit')

    if problems:
        raise ValidationError({'resume': problems}, 'Invalid application data')

    encoded = base64.b64encode(payload).decode('ascii')
    return f'data:{mimetype};base64,{encoded}'


def submit_application(storage, form, upload, max_bytes, allowed_types):
    """Validate a multipart submission and persist it.

    Field and attachment problems are reported together; nothing is stored
    unless both pass.
    """
    payload = {key: form.get(key) for key in FORM_FIELDS if form.get(key) not in (None, '')}
    errors = {}

    try:
        data = validate(JobApplicationIn, payload, 'application')
    except ValidationError as exc:
        data = None
        errors.update(exc.errors)

    try:
        resume_url = read_resume(upload, max_bytes, allowed_types)
    except ValidationError as exc:
        errors.update(exc.errors)

    if errors:
        raise ValidationError(errors, 'Invalid application data')

    fields = data.model_dump()
    fields['resume_url'] = resume_url
    application = storage.applications.create(**fields)
    logger.info('New job application received: %s %s (%s)',
                application.first_name, application.last_name, application.email)
    return application
