"""
示例：使用injex注册与注入依赖
展示类注册、延迟实例注册和属性注入
作者: mrkingu
日期: 2025-06-24
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from injex import (
    inject, initialize, register, register_class, register_instance, setup_logging
)

# 应用启动时显式初始化共享注册表
initialize()
setup_logging()

register("MaxPlayers", 100)


@register_class("IPlayerRepository_")
class PlayerRepository:
    """玩家数据仓库（每次注入时实例化）"""

    def __init__(self):
        self.players = {}

    def save(self, player_id: str, data: dict) -> None:
        self.players[player_id] = data


@register_instance("ILoggerFactory", lambda cls: cls(prefix="knight"))
class LoggerFactory:
    """日志工厂（全局单例，首次使用时创建）"""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def get_logger(self, name: str) -> str:
        return f"{self.prefix}.{name}"


@register_class("LegacyRankService", deprecated=True)
class LegacyRankService:
    pass


class PlayerService:
    """玩家服务"""

    repository = inject("IPlayerRepository_", init=True)
    logger_name = inject("ILoggerFactory", lambda factory: factory.get_logger("player"))
    max_players = inject("MaxPlayers")
    rank_service = inject("LegacyRankService", necessary=False)
    mail_service = inject("IMailService", necessary=False)

    def create_player(self, player_id: str) -> dict:
        if len(self.repository.players) >= self.max_players:
            return {"success": False, "reason": "server_full"}

        self.repository.save(player_id, {"level": 1})
        return {"success": True, "logger": self.logger_name}


if __name__ == "__main__":
    service = PlayerService()
    print(service.create_player("player_001"))
    print(f"rank service: {service.rank_service}")  # 输出一次弃用警告
    print(f"mail service: {service.mail_service}")  # 未注册的可选依赖为None
