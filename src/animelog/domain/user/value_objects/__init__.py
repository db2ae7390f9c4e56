from animelog.domain.user.value_objects.email import Email
from animelog.domain.user.value_objects.user_name import UserName

__all__ = ["Email", "UserName"]
