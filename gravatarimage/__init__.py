from trac.config import *
from trac.core import *

from gravatarimage.image import (DefaultImage, GravatarImage,
                                 GravatarImageError, InvalidState,
                                 MissingRequiredField, Rating, email_hash)

class IGravatarEmailProvider(Interface):
    def get_email(author):
        """
        Return the email address whose Gravatar represents this author,
        or None if there is none
        """

from gravatarimage.providers import *

class GravatarImageModule(Component):

    email_provider = ExtensionOption('gravatar', 'email_provider',
                                     IGravatarEmailProvider,
                                     'KnownUsersEmailProvider',
        """Component used to look up the email address of a username.""")

    size = IntOption('gravatar', 'size', 80,
        """Default size of Gravatar images, in pixels.""")

    rating = ChoiceOption('gravatar', 'rating',
                          [r.value for r in Rating],
        """Highest rating of avatars to show (g, pg, r or x).""")

    default_image = ChoiceOption('gravatar', 'default_image',
                                 [d.value for d in DefaultImage],
        """Image shown for addresses without a Gravatar: empty for the
        Gravatar logo, or one of 404, mm, identicon, monsterid, wavatar,
        retro.""")

    default_image_url = Option('gravatar', 'default_image_url', '',
        """Url of a custom image shown for addresses without a Gravatar.
        Takes precedence over `default_image`.""")

    force_default_image = BoolOption('gravatar', 'force_default_image',
                                     'false',
        """Always show the default image, even for known addresses.""")

    force_secure_request = BoolOption('gravatar', 'force_secure_request',
                                      'false',
        """Load images over https even on pages served over http.""")

    def gravatar_image(self, req):
        is_secure = req.base_url.startswith("https://")
        image = GravatarImage(is_secure) \
            .set_size(self.size) \
            .set_rating(Rating(self.rating)) \
            .set_default_image(DefaultImage(self.default_image)) \
            .set_force_default_image(self.force_default_image) \
            .set_force_secure_request(self.force_secure_request) \
            .encode_default_image_url(self.default_image_url)
        self.log.debug("Gravatar image for %s (secure: %s)",
                       req.base_url, is_secure)
        return image

    def gravatar_for(self, req, author, size=None, tooltip=None):
        email = self.email_provider.get_email(author)
        if not email:
            self.log.warning("No email address known for %r, cannot "
                             "look up its Gravatar", author)
        image = self.gravatar_image(req).set_email_address(email)
        if size is not None:
            image.set_size(size)
        if tooltip is not None:
            image.set_tooltip(tooltip)
        return image
