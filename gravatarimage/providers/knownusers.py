import re

from trac.core import *

from gravatarimage import IGravatarEmailProvider

__all__ = ['KnownUsersEmailProvider']

class KnownUsersEmailProvider(Component):
    implements(IGravatarEmailProvider)

    # from trac source
    _long_author_re = re.compile(r'.*<([^@]+)@([^@]+)>\s*|([^@]+)@([^@]+)')

    def get_email(self, author):
        if not author or author == 'anonymous':
            return None
        if '@' not in author:
            for username, name, email in self.env.get_known_users():
                if username == author:
                    return email or None
            return None

        author_info = self._long_author_re.match(author)
        if not author_info:
            return None
        if author_info.group(1):
            return '%s@%s' % author_info.group(1, 2)
        return '%s@%s' % author_info.group(3, 4)
