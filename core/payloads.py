from .exceptions import ValidationError


def json_body(request):
    """Request body as a dict; any other JSON shape is a 400."""
    data = request.data
    if hasattr(data, 'dict'):  # QueryDict from form posts
        data = data.dict()
    if not isinstance(data, dict):
        raise ValidationError('O corpo da requisição deve ser um objeto JSON', error_code='INVALID_BODY')
    return data
