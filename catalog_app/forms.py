"""
Request validation for the JSON API.

Field names are the document keys the API accepts, so errors can point at the
exact key the client sent.
"""

from django import forms

from catalog_app.services.store_result import FieldError


class DocumentForm(forms.Form):
    def field_errors(self) -> list[FieldError]:
        """Return every validation failure as a FieldError."""
        errors = []
        for name, messages in self.errors.items():
            for message in messages:
                errors.append(FieldError(path=name, msg=message, value=self.data.get(name)))
        return errors


class MovieCreateForm(DocumentForm):
    Movie_ID = forms.IntegerField(
        error_messages={
            "required": "Movie_ID must be a number",
            "invalid": "Movie_ID must be a number",
        },
    )
    Title = forms.CharField(
        strip=False,
        error_messages={"required": "Title is required"},
    )
    Year = forms.IntegerField(
        required=False,
        error_messages={"invalid": "Year must be a number"},
    )
    imdbRating = forms.FloatField(
        required=False,
        min_value=0,
        max_value=10,
        error_messages={
            "invalid": "Rating must be between 0 and 10",
            "min_value": "Rating must be between 0 and 10",
            "max_value": "Rating must be between 0 and 10",
        },
    )


class MovieUpdateForm(DocumentForm):
    """
    Partial update: keys may be omitted, but not sent as an empty string.

    Whitespace-only values count as present, matching the create form.
    """

    NON_EMPTY_WHEN_PRESENT = {
        "Title": "Title cannot be empty",
        "Released": "Released date cannot be empty",
    }

    Title = forms.CharField(required=False, strip=False)
    Released = forms.CharField(required=False, strip=False)

    def clean(self):
        cleaned_data = super().clean()
        for name, message in self.NON_EMPTY_WHEN_PRESENT.items():
            if name not in self.data:
                continue
            value = self.data.get(name)
            if value is None or value == "":
                self.add_error(name, message)
        return cleaned_data
