from .proxy import ProxyModel, ProxySessionModel
from .user import UserModel
from .setting import SettingModel

__all__ = [
    "ProxyModel",
    "ProxySessionModel",
    "UserModel",
    "SettingModel",
]
