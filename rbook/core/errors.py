class QuizContentError(ValueError):
    """A quiz record that cannot be rendered as written."""

    def __init__(self, message: str, quiz_title: str | None = None, question_number: int | None = None):
        self.quiz_title = quiz_title
        self.question_number = question_number
        self.detail = message
        where = []
        if quiz_title:
            where.append(f"quiz '{quiz_title}'")
        if question_number is not None:
            where.append(f"question {question_number}")
        prefix = ", ".join(where)
        super().__init__(f"{prefix}: {message}" if prefix else message)


class CoercionError(ValueError):
    def __init__(self, text: object, target: str):
        self.text = text
        self.target = target
        super().__init__(f"cannot convert {text!r} to {target}")
