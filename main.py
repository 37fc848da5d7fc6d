"""
Main entry point for the Quotebook service.
Provides command-line interface and system initialization.
"""

import argparse
import json
import sys
from typing import List, Optional

from utils import api_logger, initialize_logging, QuotebookError, ValidationError
from quotebook import QuoteStore, format_category_listing


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        description="Quotebook - 分类语录与数学工具 HTTP 服务",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python main.py api                            # 以配置文件/PORT 环境变量启动API服务器
  python main.py api --host 127.0.0.1 --port 8080 --reload
  python main.py categories                     # 列出全部分类
  python main.py quote happinessQuotes          # 随机输出一条语录
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    # API服务器
    api_parser = subparsers.add_parser('api', help='启动API服务器')
    api_parser.add_argument('--host', default=None, help='监听地址 (默认取自 api_config)')
    api_parser.add_argument('--port', type=int, default=None, help='监听端口 (默认: PORT 环境变量或 3000)')
    api_parser.add_argument('--reload', action='store_true', help='开发模式，代码变更自动重载')

    # 分类列表
    subparsers.add_parser('categories', help='列出全部分类')

    # 随机语录
    quote_parser = subparsers.add_parser('quote', help='从指定分类随机输出一条语录')
    quote_parser.add_argument('category', help='分类名称（区分大小写）')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数，返回进程退出码"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == 'api':
            initialize_logging()
            from api.app import run
            run(host=args.host, port=args.port, reload=True if args.reload else None)

        elif args.command == 'categories':
            print(format_category_listing(QuoteStore().list_categories()))

        elif args.command == 'quote':
            quote = QuoteStore().random_quote(args.category)
            print(json.dumps(quote.model_dump(), ensure_ascii=False))

        else:
            parser.print_help()

    except KeyboardInterrupt:
        api_logger.info("[Main] Received keyboard interrupt")
    except ValidationError as e:
        print(f"错误: {e.message}", file=sys.stderr)
        return 1
    except QuotebookError as e:
        api_logger.error(f"[Main] System error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
