# Routes package init
"""
LinkHub Backend — API Routes Package
======================================

Route Inventory:
    - users.py:        /users, /users/{userId}, /users/{userId}/profile-views,
                       /users/{userId}/skills, /users/{userId}/premium
    - connections.py:  /connections, /connections/{userId|connectionId}
    - posts.py:        /posts, /posts/{postId}, /posts/{postId}/likes
    - messages.py:     /messages, /messages/{userId|messageId}
    - health.py:       /health

Routes are THIN: read path/body values, call one service method, return its
result. Query documents are built by the services via linkhub.queries.
"""
