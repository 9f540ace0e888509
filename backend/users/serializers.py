from rest_framework import serializers
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken

#Dynamically retrieve user model created in settings.py
User=get_user_model()

MIN_PASSWORD_LENGTH = 6


class UserDetailsSerializer(serializers.ModelSerializer):
    """
    Serializer for returning authenticated user details
    """
    class Meta:
        model=User
        fields=(
            'id',
            'email',
            'date_joined',
        )
        read_only_fields=fields


class UserRegistrationSerializer(serializers.ModelSerializer):
    password=serializers.CharField(
        write_only=True,
        required=True,
        min_length=MIN_PASSWORD_LENGTH,
        style={'input_type': 'password'},
        error_messages={'min_length': f'Password must be at least {MIN_PASSWORD_LENGTH} characters'},
    )

    class Meta:
        model=User
        fields=(
            'email',
            'password',
        )
        extra_kwargs = {
            # Uniqueness is checked case-insensitively in validate_email
            'email': {'required': True, 'validators': []},
        }

    def validate_email(self, value):
        email = User.objects.normalize_email(value)
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("An account with this email already exists")
        return email

    def create(self, validated_data):
        # Use the custom manager's creation method
        return User.objects.create_user(
            email=validated_data['email'],
            password=validated_data['password'],
        )

    def to_representation(self, instance):
        refresh = RefreshToken.for_user(instance)
        return {
            'message': 'Account created successfully',
            'user': UserDetailsSerializer(instance).data,
            'access': str(refresh.access_token),
            'refresh': str(refresh),
        }


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Login serializer: email + password in, token pair plus user details out.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        # Custom claim readable by the client without an extra request
        token['email'] = user.email
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserDetailsSerializer(self.user).data
        data['message'] = 'Welcome back'
        return data
