import os
from pathlib import Path


# 获取项目根目录
BASE_DIR = Path(__file__).resolve().parents[1]

# 常用子目录路径，配置目录可用环境变量覆盖
CONFIG_DIR = Path(os.getenv("QUOTEBOOK_CONFIG_DIR", str(BASE_DIR / 'config')))
LOG_DIR = BASE_DIR / 'log'
