"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, adaptive work factor)
  • Signed bearer token creation & verification
  • ``AuthService`` — signup / signin / profile orchestration
  • Signup / Signin / Profile API routes
"""
