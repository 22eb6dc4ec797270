from springline.menu.top_bar.bar import Bar

__all__ = [
    "Bar",
]
