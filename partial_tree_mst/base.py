from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """最小生成树求解器的公共接口。

    ``PartialTreeMST`` 与 ``KruskalMST`` 都实现 ``execute(graph)``，
    返回 ``(弧列表, 总权重)``，基准测试按这个约定调用两者。
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        raise NotImplementedError
