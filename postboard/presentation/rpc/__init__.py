"""Post RPC service (gRPC).

Messages are JSON objects on the wire; services are registered with generic
handlers rather than generated stubs.

Services:
    post.Post           - GetAllPost, GetPostById (public)
    post.ProtectedPost  - CreatePost, UpdatePost, DeletePost (identity required)
"""
