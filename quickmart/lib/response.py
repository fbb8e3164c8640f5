class Response:

    def __init__(self, message="", data=None, status=200, success=None):
        self.status = status
        self.message = message
        self.data = data
        self.success = status < 400 if success is None else success

    def to_dict(self):
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }, self.status
