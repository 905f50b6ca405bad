import hashlib
from enum import Enum
from urllib.parse import quote

from genshi.builder import tag

from trac.core import TracError


class GravatarImageError(TracError):
    pass

class MissingRequiredField(GravatarImageError):
    pass

class InvalidState(GravatarImageError):
    pass


class Rating(Enum):
    """
    Highest self-assigned rating an avatar may carry to be shown.
    """
    G = 'g'
    PG = 'pg'
    R = 'r'
    X = 'x'

class DefaultImage(Enum):
    """
    What Gravatar serves when no avatar is registered for the hash.
    """
    DEFAULT = ''
    HTTP_404 = '404'
    MYSTERY_MAN = 'mm'
    IDENTICON = 'identicon'
    MONSTER_ID = 'monsterid'
    WAVATAR = 'wavatar'
    RETRO = 'retro'


def email_hash(email):
    return hashlib.md5(email.encode('utf-8')).hexdigest()


class GravatarImage(object):
    """
    Fluent builder for a Gravatar ``<img>`` tag.

    ``is_secure`` tells whether the page embedding the image is itself
    served over https; the secure endpoint is used when it is, or when
    ``set_force_secure_request(True)`` was called.

        GravatarImage(is_secure=False).set_email_address('test@example.com') \\
            .set_default_image(DefaultImage.IDENTICON).render()
    """

    def __init__(self, is_secure=False):
        self.is_secure = is_secure
        self.email_address = None
        self.size = 80
        self.rating = Rating.G
        self.default_image = DefaultImage.DEFAULT
        self.default_image_url = None
        self.force_default_image = False
        self.force_secure_request = False
        self.tooltip = None

    def set_email_address(self, email_address):
        self.email_address = email_address
        return self

    def set_size(self, size):
        self.size = size
        return self

    def set_rating(self, rating):
        self.rating = rating
        return self

    def set_default_image(self, default_image):
        self.default_image = default_image
        return self

    def set_default_image_url(self, url):
        self.default_image_url = url
        return self

    def encode_default_image_url(self, value=True):
        """
        With a boolean, percent-encode the url already given to
        `set_default_image_url` (raising `InvalidState` if there is none).
        With a string, encode and store that url; an empty string is ignored.
        """
        if isinstance(value, str):
            if value:
                self.default_image_url = quote(value, safe='')
            return self
        if value:
            if not self.default_image_url:
                raise InvalidState("A default image url must be set "
                                   "before it can be encoded")
            self.default_image_url = quote(self.default_image_url, safe='')
        return self

    def set_force_default_image(self, flag):
        self.force_default_image = flag
        return self

    def set_force_secure_request(self, flag):
        self.force_secure_request = flag
        return self

    def set_tooltip(self, text):
        self.tooltip = text
        return self

    def url(self):
        if not self.email_address:
            raise MissingRequiredField("An email address is required "
                                       "to render a Gravatar image")
        if self.is_secure or self.force_secure_request:
            base = "https://secure.gravatar.com/avatar/"
        else:
            base = "http://www.gravatar.com/avatar/"

        default = self.default_image_url or self.default_image.value
        href = base + email_hash(self.email_address)
        href += "?s=%s&d=%s" % (self.size, default)
        if self.force_default_image:
            href += "&f=y"
        href += "&r=%s" % self.rating.value
        return href

    def render(self):
        img = tag.img(src=self.url(), class_='gravatar',
                      alt='Gravatar image', title=self.tooltip)
        return img.generate().render('xhtml', encoding=None)

    __html__ = render

    def __str__(self):
        return self.render()
