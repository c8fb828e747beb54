from functools import lru_cache

from aws_lambda_powertools import Logger

SERVICE_PREFIX = "railway"


@lru_cache(maxsize=None)
def get_logger(context: str) -> Logger:
    """境界づけられたコンテキストごとの Logger を返す

    service キーは "railway.inventory" / "railway.booking" のようになる。
    同じコンテキストのモジュールは同じインスタンスを共有する。
    """
    return Logger(service=f"{SERVICE_PREFIX}.{context}")
