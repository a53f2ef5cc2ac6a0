"""Grant (or revoke) admin rights for an existing user.

Usage: python scripts/make_admin.py <username> [--revoke]

This is the only way to create an administrator besides the seeded one;
the registration API always creates regular users.
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pixelperfect import create_app
from pixelperfect.errors import NotFoundError


def main(argv):
    if not argv or argv[0].startswith('-'):
        print(__doc__)
        return 2

    username = argv[0]
    grant = '--revoke' not in argv[1:]

    app = create_app()
    storage = app.extensions['pixelperfect']['storage']
    with app.app_context():
        try:
            storage.users.set_admin(username, grant)
        except NotFoundError:
            print(f"No user named {username}")
            return 1

    print(f"{username} is {'now' if grant else 'no longer'} an admin")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
