import os
from pathlib import Path
from dotenv import load_dotenv

from inspired.services.env_utils import env_int, sanitize_env_value

load_dotenv()

# backend 目录
BACKEND_ROOT = Path(__file__).parent


class Config:
    """应用配置"""
    APP_ENV = sanitize_env_value(os.getenv('APP_ENV'), 'development')

    PORT = env_int(os.getenv('PORT'), 8024)

    # 日志级别 (app.logger 及 inspired.* 子 logger)
    LOG_LEVEL = sanitize_env_value(os.getenv('LOG_LEVEL'), 'INFO').upper()

    # 数据文件: 优先使用环境变量 DATA_FILE，否则使用 backend/data/db.json
    DATA_FILE = sanitize_env_value(
        os.getenv('DATA_FILE'),
        str(BACKEND_ROOT / 'data' / 'db.json')
    )

    # /img/... 请求相对于该目录读取文件
    IMAGE_ROOT = sanitize_env_value(os.getenv('IMAGE_ROOT'), str(BACKEND_ROOT))

    # API 配置
    API_PREFIX = '/api/goods'
    IMAGE_PREFIX = '/img'
    CATEGORIES_MARKER = '/api/categories'
    COLORS_MARKER = '/api/colors'
