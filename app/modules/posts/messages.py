# Response messages shared by the posts and comments routers.
# Existing clients match on these strings, keep them exact.

POST_NOT_FOUND = "The post with the specified ID does not exist"
POST_FIELDS_REQUIRED = "Please provide title and contents for the post"

POSTS_RETRIEVE_FAILED = "The posts information could not be retrieved"
POST_RETRIEVE_FAILED = "The post information could not be retrieved"
POST_SAVE_FAILED = "There was an error while saving the post to the database"
POST_UPDATE_FAILED = "The post information could not be modified"
POST_REMOVE_FAILED = "The post could not be removed"
COMMENTS_RETRIEVE_FAILED = "The comments information could not be retrieved"
