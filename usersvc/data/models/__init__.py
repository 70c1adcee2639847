#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from usersvc.data.models.user import UserModel

__all__ = ["UserModel"]
