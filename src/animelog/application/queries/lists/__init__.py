from animelog.application.queries.lists.get_user_list_query import GetUserListQuery

__all__ = ["GetUserListQuery"]
