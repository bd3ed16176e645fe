from clients.users_api_sdk.config import SDKConfig
from clients.users_api_sdk.errors import ApiError
from clients.users_api_sdk.http_client import HttpClient
from clients.users_api_sdk.normalizers import DEPARTMENT_PLACEHOLDER, normalize_remote_user, split_full_name
from clients.users_api_sdk.users_client import UsersClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "HttpClient",
    "UsersClient",
    "DEPARTMENT_PLACEHOLDER",
    "normalize_remote_user",
    "split_full_name",
]
