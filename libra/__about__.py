__version__ = "1.0.0"
__description__ = "libra : Library REST API with field shaping, paging and HATEOAS links"
