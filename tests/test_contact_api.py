from datetime import datetime

import pytest

from .conftest import VALID_MESSAGE


def submit(client, payload=None):
    return client.post('/api/contact', json=payload or VALID_MESSAGE)


def test_submit_reply_then_missing_id(client):
    response = submit(client)
    assert response.status_code == 200
    created = response.get_json()
    assert created['status'] == 'new'
    assert created['reply'] is None
    assert created['repliedAt'] is None
    for field, value in VALID_MESSAGE.items():
        assert created[field] == value

    response = client.post(f"/api/contact/{created['id']}/reply",
                           json={'reply': 'Thanks!'})
    assert response.status_code == 200
    replied = response.get_json()
    assert replied['status'] == 'replied'
    assert replied['reply'] == 'Thanks!'
    assert replied['createdAt'] == created['createdAt']
    assert datetime.fromisoformat(replied['repliedAt'])

    response = client.get('/api/contact/not-a-real-id')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Message not found'}


def test_submit_with_empty_name_names_the_field(client, store):
    response = submit(client, dict(VALID_MESSAGE, name=''))

    assert response.status_code == 400
    body = response.get_json()
    assert body['error'] == 'Validation failed'
    assert '"name"' in body['message']
    assert body['fields'] == {'name': ['Name is required']}
    assert len(store) == 0


@pytest.mark.parametrize('field, value', [
    ('name', ''),
    ('email', 'ana.x.com'),
    ('subject', ''),
    ('message', 'too short'),
])
def test_invalid_submissions_do_not_reach_the_store(client, store, field, value):
    store.create(VALID_MESSAGE)

    response = submit(client, dict(VALID_MESSAGE, **{field: value}))

    assert response.status_code == 400
    assert field in response.get_json()['fields']
    assert len(store) == 1


def test_submit_without_json_body(client, store):
    response = client.post('/api/contact', data='name=Ana',
                           content_type='application/x-www-form-urlencoded')

    assert response.status_code == 400
    assert len(store) == 0


def test_get_one(client):
    created = submit(client).get_json()

    response = client.get(f"/api/contact/{created['id']}")

    assert response.status_code == 200
    assert response.get_json() == created


def test_list_empty(client):
    response = client.get('/api/contact')

    assert response.status_code == 200
    assert response.get_json() == []


def test_list_newest_first(client):
    first = submit(client).get_json()
    second = submit(client, dict(VALID_MESSAGE, subject='Pricing')).get_json()

    listed = client.get('/api/contact').get_json()

    assert [m['id'] for m in listed] == [second['id'], first['id']]


def test_list_filtered_by_status(client):
    first = submit(client).get_json()
    second = submit(client).get_json()
    client.post(f"/api/contact/{first['id']}/reply", json={'reply': 'Done'})

    new = client.get('/api/contact?status=new').get_json()
    replied = client.get('/api/contact?status=replied').get_json()

    assert [m['id'] for m in new] == [second['id']]
    assert [m['id'] for m in replied] == [first['id']]


def test_list_rejects_unknown_status(client):
    response = client.get('/api/contact?status=archived')

    assert response.status_code == 400
    assert 'status' in response.get_json()['fields']


def test_reply_requires_text(client, store):
    created = submit(client).get_json()

    response = client.post(f"/api/contact/{created['id']}/reply", json={'reply': ''})

    assert response.status_code == 400
    assert response.get_json()['fields'] == {'reply': ['Reply is required']}
    assert store.get(created['id']).status == 'new'


def test_reply_unknown_id(client, store):
    created = submit(client).get_json()

    response = client.post('/api/contact/missing/reply', json={'reply': 'Thanks!'})

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Message not found'}
    assert len(store) == 1
    assert store.get(created['id']).reply is None


def test_second_reply_overwrites(client):
    # A repeated reply replaces the earlier text rather than being rejected.
    created = submit(client).get_json()
    url = f"/api/contact/{created['id']}/reply"
    client.post(url, json={'reply': 'Thanks!'})

    response = client.post(url, json={'reply': 'Updated'})

    assert response.status_code == 200
    assert response.get_json()['reply'] == 'Updated'


def test_stats(client):
    created = submit(client).get_json()
    submit(client)
    client.post(f"/api/contact/{created['id']}/reply", json={'reply': 'Thanks!'})

    response = client.get('/api/contact/stats')

    assert response.status_code == 200
    assert response.get_json() == {'total': 2, 'new': 1, 'replied': 1}


def test_unsupported_method(client):
    response = client.delete('/api/contact')

    assert response.status_code == 405
    assert response.get_json() == {'error': 'Method not allowed'}


def test_get_on_reply_route_not_allowed(client):
    created = submit(client).get_json()

    response = client.get(f"/api/contact/{created['id']}/reply")

    assert response.status_code == 405


def test_unexpected_fault_is_hidden(client, store, monkeypatch):
    def explode(fields):
        raise RuntimeError('disk on fire')

    monkeypatch.setattr(store, 'create', explode)

    response = submit(client)

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Server error'}
    assert 'disk on fire' not in response.get_data(as_text=True)


def test_cors_headers_on_api(client):
    response = client.get('/api/contact', headers={'Origin': 'https://firehawk.io'})

    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'https://firehawk.io')


def test_whitespace_name_is_accepted(client):
    response = submit(client, dict(VALID_MESSAGE, name=' '))

    assert response.status_code == 200
    assert response.get_json()['name'] == ' '


def test_whitespace_reply_is_accepted(client):
    created = submit(client).get_json()

    response = client.post(f"/api/contact/{created['id']}/reply", json={'reply': '  '})

    assert response.status_code == 200
    assert response.get_json()['status'] == 'replied'
    assert response.get_json()['reply'] == '  '


def test_special_use_email_domain_is_rejected(client, store):
    # email-validator refuses reserved domains such as .test
    response = submit(client, dict(VALID_MESSAGE, email='a@b.test'))

    assert response.status_code == 400
    assert 'email' in response.get_json()['fields']
    assert len(store) == 0
