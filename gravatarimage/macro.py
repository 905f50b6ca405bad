from trac.core import *
from trac.util import as_bool
from trac.util.html import Markup
from trac.wiki.api import parse_args
from trac.wiki.macros import WikiMacroBase

from gravatarimage import GravatarImageModule
from gravatarimage.image import DefaultImage, Rating

class GravatarMacro(WikiMacroBase):
    """Show the Gravatar of a user or email address.

    The first argument is a Trac username, an email address or an author
    string like `Jane Doe <jane@example.org>`. Keyword arguments override
    the `[gravatar]` defaults of trac.ini:
     * `size`: size in pixels
     * `rating`: one of `g`, `pg`, `r`, `x`
     * `default`: one of `404`, `mm`, `identicon`, `monsterid`, `wavatar`,
       `retro`, or the url of an image
     * `force_default`: always show the default image
     * `secure`: load the image over https
     * `title`: tooltip of the image

    Example:
    {{{
    [[Gravatar(jane@example.org, size=40, default=identicon)]]
    }}}
    """

    def expand_macro(self, formatter, name, content, args=None):
        largs, kwargs = parse_args(content or '', strict=False)
        if not largs:
            raise TracError("%s needs a username or email address" % name)
        author = largs[0].strip()

        size = kwargs.get('size')
        if size is not None:
            try:
                size = int(size)
            except ValueError:
                raise TracError("Invalid size %r" % size)

        image = GravatarImageModule(self.env).gravatar_for(
            formatter.req, author, size=size, tooltip=kwargs.get('title'))

        if 'rating' in kwargs:
            try:
                image.set_rating(Rating(kwargs['rating'].lower()))
            except ValueError:
                raise TracError("Invalid rating %r" % kwargs['rating'])
        if 'default' in kwargs:
            default = kwargs['default']
            if '/' in default:
                image.encode_default_image_url(default)
            else:
                try:
                    image.set_default_image(DefaultImage(default.lower()))
                except ValueError:
                    raise TracError("Invalid default image %r" % default)
                image.set_default_image_url(None)
        if 'force_default' in kwargs:
            image.set_force_default_image(as_bool(kwargs['force_default']))
        if 'secure' in kwargs:
            image.set_force_secure_request(as_bool(kwargs['secure']))

        self.log.debug("Rendering Gravatar of %r", author)
        return Markup(image.render())
