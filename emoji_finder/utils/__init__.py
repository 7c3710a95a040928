# emoji_finder/utils/__init__.py
# config, logging and small timing/cache helpers
