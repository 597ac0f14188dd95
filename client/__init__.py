"""
client — Python front end for the auth API.

Provides:
  • ``AuthClient`` — async httpx wrapper for signup / signin / profile
  • ``CredentialStore`` — token + user persisted to a JSON file
  • form validators mirroring the server's input rules
  • ``python -m client`` command line
"""
