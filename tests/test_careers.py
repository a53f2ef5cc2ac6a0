import base64
import io

JOB = {
    'title': 'Full-Stack Developer',
    'location': 'Remote',
    'type': 'Full-time',
    'salary': 'Competitive',
    'description': 'Build web applications.',
}

APPLICANT = {
    'firstName': 'Jane',
    'lastName': 'Doe',
    'email': 'jane.doe@example.com',
    'position': 'Full-Stack Developer',
    'coverLetter': 'I would love to join.',
}

FIVE_MIB = 5 * 1024 * 1024


def _apply(client, resume=None, **overrides):
    data = dict(APPLICANT, **overrides)
    if resume is not None:
        data['resume'] = resume
    return client.post('/api/applications', data=data, content_type='multipart/form-data')


def _applications(admin_client):
    r = admin_client.get('/api/applications')
    assert r.status_code == 200
    return r.get_json()


def test_public_job_list_hides_inactive(admin_client, client):
    admin_client.post('/api/jobs', json=JOB)
    admin_client.post('/api/jobs', json=dict(JOB, title='Closed role', active=False))

    public = client.get('/api/jobs').get_json()
    admin_client.post('/api/logout')
    anonymous = client.get('/api/jobs').get_json()
    assert [j['title'] for j in public] == [j['title'] for j in anonymous] == ['Full-Stack Developer']
    assert all(job['active'] for job in anonymous)


def test_admin_job_list_includes_inactive(admin_client):
    admin_client.post('/api/jobs', json=JOB)
    admin_client.post('/api/jobs', json=dict(JOB, title='Closed role', active=False))
    titles = [j['title'] for j in admin_client.get('/api/jobs/all').get_json()]
    assert titles == ['Full-Stack Developer', 'Closed role']


def test_new_job_defaults_to_active(admin_client):
    created = admin_client.post('/api/jobs', json=JOB).get_json()
    assert created['active'] is True


def test_inactive_job_is_not_found_for_public(app, admin_client):
    job_id = admin_client.post('/api/jobs', json=dict(JOB, active=False)).get_json()['id']
    assert admin_client.get(f'/api/jobs/{job_id}').status_code == 200

    anonymous = app.test_client()
    hidden = anonymous.get(f'/api/jobs/{job_id}')
    missing = anonymous.get('/api/jobs/999')
    assert hidden.status_code == missing.status_code == 404
    assert hidden.get_json() == missing.get_json()


def test_deactivating_a_job_hides_it(admin_client, client):
    job_id = admin_client.post('/api/jobs', json=JOB).get_json()['id']
    r = admin_client.put(f'/api/jobs/{job_id}', json={'active': False})
    assert r.status_code == 200
    assert r.get_json()['title'] == JOB['title']
    admin_client.post('/api/logout')
    assert client.get('/api/jobs').get_json() == []


def test_application_without_resume(client, admin_client):
    r = _apply(client)
    assert r.status_code == 201
    assert r.get_json() == {'message': 'Application submitted successfully'}

    [application] = _applications(admin_client)
    assert application['firstName'] == 'Jane'
    assert application['email'] == APPLICANT['email']
    assert application['resumeUrl'] is None
    assert application['jobId'] is None


def test_application_with_pdf_is_stored_inline(app, admin_client):
    job_id = admin_client.post('/api/jobs', json=JOB).get_json()['id']
    content = b'%PDF-1.4 resume'

    public = app.test_client()
    r = _apply(public, resume=(io.BytesIO(content), 'cv.pdf', 'application/pdf'), jobId=str(job_id))
    assert r.status_code == 201

    [application] = _applications(admin_client)
    assert application['jobId'] == job_id
    prefix = 'data:application/pdf;base64,'
    assert application['resumeUrl'].startswith(prefix)
    assert base64.b64decode(application['resumeUrl'][len(prefix):]) == content


def test_resume_at_limit_is_accepted(client, admin_client):
    payload = io.BytesIO(b'a' * FIVE_MIB)
    assert _apply(client, resume=(payload, 'cv.txt', 'text/plain')).status_code == 201


def test_oversized_resume_is_rejected_without_persisting(app, admin_client):
    public = app.test_client()
    payload = io.BytesIO(b'a' * (FIVE_MIB + 1))
    r = _apply(public, resume=(payload, 'cv.txt', 'text/plain'))
    assert r.status_code == 400
    assert 'resume' in r.get_json()['errors']
    assert _applications(admin_client) == []


def test_unsupported_resume_type_is_rejected(app, admin_client):
    public = app.test_client()
    r = _apply(public, resume=(io.BytesIO(b'\x89PNG'), 'photo.png', 'image/png'))
    assert r.status_code == 400
    body = r.get_json()
    assert body['message'] == 'Invalid application data'
    assert list(body['errors']) == ['resume']
    assert _applications(admin_client) == []


def test_docx_resume_is_accepted(client):
    docx = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
    r = _apply(client, resume=(io.BytesIO(b'PK\x03\x04'), 'cv.docx', docx))
    assert r.status_code == 201


def test_field_and_file_errors_are_reported_together(app, admin_client):
    public = app.test_client()
    r = _apply(public, resume=(io.BytesIO(b'x'), 'cv.png', 'image/png'), email='not-an-email', firstName='')
    assert r.status_code == 400
    assert set(r.get_json()['errors']) == {'email', 'firstName', 'resume'}
    assert _applications(admin_client) == []


def test_applications_by_job_and_soft_reference(app, admin_client):
    job_id = admin_client.post('/api/jobs', json=JOB).get_json()['id']
    public = app.test_client()
    _apply(public, jobId=str(job_id))
    _apply(public)

    assert len(admin_client.get(f'/api/applications/job/{job_id}').get_json()) == 1

    # Removing the opening leaves its applications untouched
    assert admin_client.delete(f'/api/jobs/{job_id}').status_code == 204
    applications = _applications(admin_client)
    assert len(applications) == 2
    assert applications[0]['jobId'] == job_id


def test_get_and_delete_application(client, admin_client):
    _apply(client)
    [application] = _applications(admin_client)

    r = admin_client.get(f"/api/applications/{application['id']}")
    assert r.status_code == 200
    assert r.get_json() == application

    assert admin_client.delete(f"/api/applications/{application['id']}").status_code == 204
    assert admin_client.delete(f"/api/applications/{application['id']}").status_code == 404
    assert admin_client.get(f"/api/applications/{application['id']}").status_code == 404


def test_job_id_beyond_integer_range_is_a_field_error(app, admin_client):
    public = app.test_client()
    r = _apply(public, jobId='99999999999999999999')
    assert r.status_code == 400
    assert set(r.get_json()['errors']) == {'jobId'}
    assert _applications(admin_client) == []


def test_application_lookups_beyond_integer_range(admin_client):
    huge = '99999999999999999999'
    r = admin_client.get(f'/api/applications/job/{huge}')
    assert r.status_code == 200
    assert r.get_json() == []
    assert admin_client.get(f'/api/applications/{huge}').status_code == 404
    assert admin_client.delete(f'/api/applications/{huge}').status_code == 404
