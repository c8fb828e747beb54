from .request_models import CallerRequest as CallerRequest
