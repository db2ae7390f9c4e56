from animelog.domain.lists.value_objects.list_category import ListCategory
from animelog.domain.lists.value_objects.membership_change import MembershipChange

__all__ = ["ListCategory", "MembershipChange"]
