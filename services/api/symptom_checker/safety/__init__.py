from symptom_checker.safety.red_flags import check_red_flags

__all__ = ["check_red_flags"]
