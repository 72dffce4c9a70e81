"""
auth — User authentication module.

Provides:
  • HS512 JWT creation & verification
  • Password hashing (bcrypt)
  • Signup / signin / fetchuserinfo / signout API routes
  • ``get_current_user_id`` FastAPI dependency
"""
