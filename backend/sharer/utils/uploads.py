from sharer.domain.exceptions import ValidationError

ALLOWED_EXTENSIONS = {"html", "htm"}


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def read_html_upload(file, encoding="utf-8"):
    """
    Read an uploaded .html/.htm file into a string.
    Returns None when no file was sent.
    """
    if file is None or not file.filename:
        return None

    if not allowed_file(file.filename):
        raise ValidationError("Please upload an HTML file")

    raw = file.read()
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        raise ValidationError("Uploaded file is not valid UTF-8")


def resolve_form_content(text, file):
    """
    Textarea content wins over the uploaded file when it is not blank.
    """
    if text and text.strip():
        return text
    return read_html_upload(file)
