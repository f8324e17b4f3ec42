"""Run configuration loaded from YAML."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


@dataclass
class BenchmarkSettings:
    """基准测试配置"""
    sizes: List[int] = field(default_factory=lambda: [10, 100, 1000])
    iterations: int = 3
    density: float = 0.1  # 生成树之外额外边的比例
    max_weight: int = 100
    seed: Optional[int] = None
    results_dir: Optional[str] = None  # 为 None 时不保存结果


@dataclass
class MSTConfig:
    """最小生成树运行配置"""
    report_arcs: bool = True  # 每接受一条弧输出一行诊断日志
    verify: bool = False  # 用 Kruskal 结果交叉校验
    log_level: str = "INFO"
    log_format: str = "keyvalue"
    benchmark: BenchmarkSettings = field(default_factory=BenchmarkSettings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MSTConfig:
        """由字典构建配置，未知键抛出 ``ValueError``。"""
        data = dict(data)
        bench = data.pop("benchmark", None) or {}
        _check_keys(cls, data)
        _check_keys(BenchmarkSettings, bench)
        return cls(benchmark=BenchmarkSettings(**bench), **data)


def _check_keys(klass: type, data: Dict[str, Any]) -> None:
    known = {f.name for f in fields(klass)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown {klass.__name__} keys: {', '.join(unknown)}")


def load_config(path: Union[str, Path, None] = None) -> MSTConfig:
    """Load an :class:`MSTConfig` from ``path``; a missing file yields defaults."""
    if path is None:
        return MSTConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return MSTConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return MSTConfig.from_dict(data)
