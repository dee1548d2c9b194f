from .goods import goods_bp

__all__ = ['goods_bp']
