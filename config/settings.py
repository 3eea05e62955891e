# configurações globais

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

#limites usados pelas entidades

PORTION_LIMITS = {
    'min': 0.0,     # exclusivo: porção precisa ser > min
    'max': 1000.0,  # inclusivo
}
