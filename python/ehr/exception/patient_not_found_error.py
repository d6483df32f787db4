class PatientNotFoundError(Exception):
    """
    Exception raised if no patient matches a given UID.
    """

    patient_uid: str

    def __init__(self, patient_uid: str):
        super().__init__(f"No patient found with UID '{patient_uid}'.")
        self.patient_uid = patient_uid
