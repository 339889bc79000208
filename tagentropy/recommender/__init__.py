from .proxy import ProxyRecommender
