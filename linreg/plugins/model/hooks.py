from enum import Enum


class ModelHookPoints(Enum):
    """Moments of a model's life at which plugins are called."""

    POST_ATTACH_DATA = "post_attach_data"
    PRE_TRAIN = "pre_train"
    PRE_EPOCH = "pre_epoch"
    POST_EPOCH = "post_epoch"
    POST_TRAIN = "post_train"
