from .jwt_token_provider import JWTTokenProvider

__all__ = ["JWTTokenProvider"]
