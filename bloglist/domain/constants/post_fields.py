"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    URL = "url"
    AUTHOR = "author"
    LIKES = "likes"
    OWNER_USER_ID = "owner_user_id"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
