import pytest

from gravatarimage import GravatarImageModule, MissingRequiredField
from gravatarimage.image import email_hash
from gravatarimage.providers.knownusers import KnownUsersEmailProvider


@pytest.mark.parametrize('author, email', [
    ('jane', 'jane@example.org'),
    ('Jane Doe <jane@example.org>', 'jane@example.org'),
    ('jane@example.org', 'jane@example.org'),
    ('nomail', None),
    ('stranger', None),
    ('anonymous', None),
    ('', None),
    (None, None),
])
def test_known_users_email(env, author, email):
    assert KnownUsersEmailProvider(env).get_email(author) == email


def test_gravatar_image_defaults(env, req):
    image = GravatarImageModule(env).gravatar_image(req)
    url = image.set_email_address('jane@example.org').url()
    assert url == ('http://www.gravatar.com/avatar/%s?s=80&d=&r=g'
                   % email_hash('jane@example.org'))


def test_gravatar_image_secure_request(env, secure_req):
    url = GravatarImageModule(env).gravatar_image(secure_req) \
        .set_email_address('jane@example.org').url()
    assert url.startswith('https://secure.gravatar.com/avatar/')


def test_gravatar_image_from_config(env, req):
    env.config.set('gravatar', 'size', '40')
    env.config.set('gravatar', 'rating', 'pg')
    env.config.set('gravatar', 'default_image', 'mm')
    env.config.set('gravatar', 'force_default_image', 'true')
    env.config.set('gravatar', 'force_secure_request', 'true')

    url = GravatarImageModule(env).gravatar_image(req) \
        .set_email_address('jane@example.org').url()
    assert url == ('https://secure.gravatar.com/avatar/%s'
                   '?s=40&d=mm&f=y&r=pg' % email_hash('jane@example.org'))


def test_gravatar_image_default_url_is_encoded(env, req):
    env.config.set('gravatar', 'default_image', 'retro')
    env.config.set('gravatar', 'default_image_url',
                   'https://trac.example.org/chrome/site/avatar.png')

    url = GravatarImageModule(env).gravatar_image(req) \
        .set_email_address('jane@example.org').url()
    assert url.endswith('&d=https%3A%2F%2Ftrac.example.org%2Fchrome'
                        '%2Fsite%2Favatar.png&r=g')


def test_gravatar_for_username(env, req):
    html = GravatarImageModule(env).gravatar_for(
        req, 'jane', size=30, tooltip='Jane Doe').render()
    assert email_hash('jane@example.org') in html
    assert '?s=30&amp;' in html
    assert 'title="Jane Doe"' in html


def test_gravatar_for_unknown_user(env, req):
    image = GravatarImageModule(env).gravatar_for(req, 'stranger')
    with pytest.raises(MissingRequiredField):
        image.render()
