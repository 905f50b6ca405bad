from gravatarimage.providers.knownusers import *
