from restaurant_service.services.calculation import CalculationService

__all__ = ["CalculationService"]
